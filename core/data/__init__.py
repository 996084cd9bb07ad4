# -*- coding: utf-8 -*-
"""
历法静态数据（天干地支、四化、节气）
"""
