# table_excel/processors/export_worker.py
"""
Background export worker.

The worker owns one thread and speaks a small message protocol:

    inbound   {'type': 'start',   'data': ExcelExportParams | dict}
    outbound  {'type': 'success', 'data': <xlsx bytes>}
              {'type': 'error',   'data': <message>}

A started export runs to completion; there is no cancel and no timeout.
The caller terminates the worker once it has its reply.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Optional

from .export_processor import ExcelExportParams, export_excel, export_workbook_bytes, log_error, save_to_path
from ..exceptions import ExportConfigError

logger = logging.getLogger(__name__)

MESSAGE_START = 'start'
MESSAGE_SUCCESS = 'success'
MESSAGE_ERROR = 'error'


class ExportWorker:
    def __init__(self, on_message: Callable[[Dict[str, Any]], None]):
        self.on_message = on_message
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix='excel-export')
        self._terminated = False

    def post_message(self, message: Dict[str, Any]) -> Future:
        """Queues a message for the worker thread."""
        if self._terminated:
            raise RuntimeError("Export worker has been terminated")
        return self._executor.submit(self._handle_message, message)

    def _handle_message(self, message: Dict[str, Any]) -> None:
        message = message or {}
        if message.get('type') != MESSAGE_START:
            logger.debug(f"Export worker ignoring message type '{message.get('type')}'")
            return

        try:
            data = message.get('data')
            params = data if isinstance(data, ExcelExportParams) else ExcelExportParams.model_validate(data or {})
            reply = {'type': MESSAGE_SUCCESS, 'data': export_workbook_bytes(params)}
        except ExportConfigError as e:
            reply = {'type': MESSAGE_ERROR, 'data': str(e)}
        except Exception as e:
            # The caller only ever sees the reply message
            logger.exception("Export worker failed")
            reply = {'type': MESSAGE_ERROR, 'data': f"export failed: {e}"}

        self.on_message(reply)

    def terminate(self) -> None:
        self._terminated = True
        self._executor.shutdown(wait=False)


def create_export_worker(
    params: ExcelExportParams,
    save_file: Callable[[bytes, str], None] = save_to_path,
    notify_error: Callable[[str], None] = log_error,
) -> Optional[Future]:
    """
    Runs an export, in a background worker when ``params.use_worker`` is set.

    Returns:
        The worker's Future (resolved after the reply has been handled), or
        None when the export ran in the calling thread.
    """
    if not params.use_worker:
        export_excel(params, save_file=save_file, notify_error=notify_error)
        return None

    worker: Optional[ExportWorker] = None

    def on_message(message: Dict[str, Any]) -> None:
        try:
            if message.get('type') == MESSAGE_SUCCESS:
                save_file(message['data'], params.file_name)
            elif message.get('type') == MESSAGE_ERROR:
                notify_error(message['data'])
        finally:
            worker.terminate()

    worker = ExportWorker(on_message)
    logger.info(f"Starting background export of '{params.file_name}'")
    return worker.post_message({'type': MESSAGE_START, 'data': params})
