#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
批量导入服务与导入状态查询

说明：
- LoadGrowthInformationService 逐行映射并写入仓储，非法行跳过并记录原因。
- LoadStatus 保存最近一次导入的处理状态，供 StatusProcessService 查询。
- 同一时间只允许一个导入任务。
"""

import logging
import threading
from typing import IO, Any, Dict, Iterable, List, Optional, Union

from utils.exceptions import ConflictError, DomainError, ValidationError
from utils.helpers import utc_now_iso
from .country_repository import CountryRepository
from .data_providers.file_provider import read_records
from .mappers import map_row_to_model


logger = logging.getLogger(__name__)

STATE_IDLE = 'idle'
STATE_PROCESSING = 'processing'
STATE_COMPLETED = 'completed'
STATE_FAILED = 'failed'

# 返回给调用方的错误明细上限
MAX_REPORTED_ERRORS = 50


class LoadStatus:
    """最近一次导入任务的状态（线程安全）"""

    def __init__(self):
        self._lock = threading.Lock()
        self._state: Dict[str, Any] = {
            'state': STATE_IDLE,
            'source': None,
            'started_at': None,
            'finished_at': None,
            'summary': None,
            'message': None,
        }

    def begin(self, source: Optional[str]) -> None:
        with self._lock:
            if self._state['state'] == STATE_PROCESSING:
                raise ConflictError("已有导入任务正在处理中")
            self._state = {
                'state': STATE_PROCESSING,
                'source': source,
                'started_at': utc_now_iso(),
                'finished_at': None,
                'summary': None,
                'message': None,
            }

    def finish(self, summary: Dict[str, Any]) -> None:
        with self._lock:
            self._state['state'] = STATE_COMPLETED
            self._state['finished_at'] = utc_now_iso()
            self._state['summary'] = summary

    def fail(self, message: str) -> None:
        with self._lock:
            self._state['state'] = STATE_FAILED
            self._state['finished_at'] = utc_now_iso()
            self._state['message'] = message

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return dict(self._state)


class LoadGrowthInformationService:
    """从文件/记录列表批量导入增长指标"""

    def __init__(self, repository: CountryRepository, status: Optional[LoadStatus] = None):
        self.repo = repository
        self.status = status or LoadStatus()

    def load_file(self, stream: Union[IO[bytes], IO[str]], filename: str, overwrite: bool = False) -> Dict[str, Any]:
        self.status.begin(filename)
        try:
            rows = read_records(stream, filename)
        except DomainError as e:
            self.status.fail(str(e))
            raise
        except Exception as e:
            logger.exception(f"导入文件读取失败: {filename}")
            self.status.fail(str(e))
            raise
        return self._load(rows, overwrite)

    def load_records(self, rows: Iterable[Any], overwrite: bool = False, source: str = 'request') -> Dict[str, Any]:
        self.status.begin(source)
        return self._load(rows, overwrite)

    def _load(self, rows: Iterable[Any], overwrite: bool) -> Dict[str, Any]:
        total = created = updated = skipped = 0
        errors: List[Dict[str, Any]] = []
        logger.info(f"开始导入增长指标 (overwrite={overwrite})")
        try:
            for index, row in enumerate(rows):
                total += 1
                try:
                    country = map_row_to_model(row)
                except ValidationError as e:
                    skipped += 1
                    logger.debug(f"第 {index + 1} 行跳过: {str(e)}")
                    if len(errors) < MAX_REPORTED_ERRORS:
                        errors.append({'row': index + 1, 'message': str(e)})
                    continue
                if overwrite:
                    if self.repo.upsert_growth(country):
                        updated += 1
                    else:
                        created += 1
                elif self.repo.create_country_growth_info(country):
                    created += 1
                else:
                    skipped += 1
                    if len(errors) < MAX_REPORTED_ERRORS:
                        errors.append({'row': index + 1, 'message': '记录已存在'})
        except Exception as e:
            logger.exception("导入过程中发生错误")
            self.status.fail(str(e))
            raise
        summary = {
            'total': total,
            'created': created,
            'updated': updated,
            'skipped': skipped,
            'errors': errors,
        }
        self.status.finish(summary)
        logger.info(f"导入完成: 共 {total} 行, 新建 {created}, 覆盖 {updated}, 跳过 {skipped}")
        return summary


class StatusProcessService:
    """查询导入处理状态"""

    def __init__(self, repository: CountryRepository, status: LoadStatus):
        self.repo = repository
        self.status = status

    def get_status(self) -> Dict[str, Any]:
        result = self.status.snapshot()
        result['size'] = self.repo.size()
        return result
