#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
流日命宫验证服务

用已知的流日命宫记录（日期 -> 地支）检验计算结果，统计准确率。
可以同时比较三种年支来源，只报告结果，不替调用方选定来源。
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional

from core.calculators.errors import CalendarError
from core.models.daily_record import YearBranchSource
from server.services.daily_record_service import BatchRequestError, DailyRecordService

logger = logging.getLogger(__name__)


@dataclass
class PalaceMismatch:
    """一条未命中的记录"""
    date: str
    expected: str
    predicted: Optional[str]
    lunar_date: Optional[str] = None
    error: Optional[str] = None


@dataclass
class VerificationReport:
    """单个年支来源的验证结果"""
    year_branch_source: YearBranchSource
    base_palace: str
    total: int = 0
    matched: int = 0
    mismatches: List[PalaceMismatch] = field(default_factory=list)

    @property
    def accuracy(self) -> float:
        return self.matched / self.total if self.total else 0.0

    def to_dict(self) -> Dict:
        return {
            'year_branch_source': self.year_branch_source.value,
            'base_palace': self.base_palace,
            'total': self.total,
            'matched': self.matched,
            'accuracy': round(self.accuracy, 4),
            'mismatches': [vars(m) for m in self.mismatches],
        }


class FlowPalaceVerificationService:
    """流日命宫验证服务"""

    def __init__(self, record_service: Optional[DailyRecordService] = None):
        self.record_service = record_service or DailyRecordService()

    def verify(self, samples: Iterable[Mapping[str, str]], base_palace: Optional[str] = None,
               year_branch_source: YearBranchSource = YearBranchSource.NATAL_PALACE) -> VerificationReport:
        """
        检验一组已知记录

        Args:
            samples: [{'date': 'YYYY-MM-DD', 'palace': '亥'}, ...]
            base_palace: 本命命宫地支，默认取配置
            year_branch_source: 年支来源

        Returns:
            VerificationReport
        """
        base_palace = base_palace or self.record_service.config.default_base_palace
        report = VerificationReport(year_branch_source=YearBranchSource(year_branch_source),
                                    base_palace=base_palace)

        for sample in samples:
            report.total += 1
            expected = sample['palace']
            try:
                record = self.record_service.get_daily_record(sample['date'], base_palace, year_branch_source)
            except CalendarError as e:
                # 单条数据无法计算只记为未命中，继续检验其余记录
                logger.warning(f"验证记录计算失败: {sample['date']}: {e}")
                report.mismatches.append(PalaceMismatch(
                    date=sample['date'], expected=expected, predicted=None, error=str(e)
                ))
                continue

            if record.flow_day_palace == expected:
                report.matched += 1
            else:
                report.mismatches.append(PalaceMismatch(
                    date=record.date,
                    expected=expected,
                    predicted=record.flow_day_palace,
                    lunar_date=record.lunar_date_label,
                ))

        logger.info(f"流日命宫验证 [{report.year_branch_source.value}] 本命命宫={base_palace}: "
                    f"{report.matched}/{report.total} = {report.accuracy:.1%}")
        return report

    def compare_sources(self, samples: Iterable[Mapping[str, str]],
                        base_palace: Optional[str] = None,
                        max_samples: Optional[int] = None) -> List[VerificationReport]:
        """
        对三种年支来源分别验证

        Raises:
            BatchRequestError: 记录条数超过 max_samples
        """
        samples = list(samples)
        if max_samples is not None and len(samples) > max_samples:
            raise BatchRequestError(f"验证记录 {len(samples)} 条，超过上限 {max_samples} 条")
        return [self.verify(samples, base_palace, source) for source in YearBranchSource]
