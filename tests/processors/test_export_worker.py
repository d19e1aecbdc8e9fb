import threading
import unittest
from unittest.mock import MagicMock, patch

from table_excel.processors.export_processor import FILE_NAME_REQUIRED_MESSAGE, ExcelExportParams
from table_excel.processors.export_worker import (
    MESSAGE_ERROR,
    MESSAGE_START,
    MESSAGE_SUCCESS,
    ExportWorker,
    create_export_worker,
)

COLUMNS = [
    {'title': 'Name', 'dataIndex': 'name'},
    {'title': 'Info', 'children': [{'title': 'Age', 'dataIndex': 'age'}]},
]
RECORDS = [{'name': 'Ann', 'age': 30}]


class TestExportWorker(unittest.TestCase):

    def setUp(self):
        self.messages = []
        self.threads = []

        def on_message(message):
            self.messages.append(message)
            self.threads.append(threading.current_thread())

        self.worker = ExportWorker(on_message)

    def tearDown(self):
        self.worker.terminate()

    def test_start_replies_success_from_worker_thread(self):
        future = self.worker.post_message({
            'type': MESSAGE_START,
            'data': {'headerColumns': [COLUMNS], 'tableDatas': [RECORDS], 'fileName': 'a.xlsx'},
        })
        future.result(timeout=30)

        self.assertEqual(len(self.messages), 1)
        self.assertEqual(self.messages[0]['type'], MESSAGE_SUCCESS)
        self.assertIsInstance(self.messages[0]['data'], bytes)
        self.assertIsNot(self.threads[0], threading.current_thread())

    def test_config_error_replies_error(self):
        future = self.worker.post_message({
            'type': MESSAGE_START,
            'data': {'headerColumns': [COLUMNS], 'tableDatas': [RECORDS]},
        })
        future.result(timeout=30)

        self.assertEqual(self.messages, [{'type': MESSAGE_ERROR, 'data': FILE_NAME_REQUIRED_MESSAGE}])

    def test_unexpected_failure_replies_error(self):
        params = ExcelExportParams.model_validate({
            'headerColumns': [[{'title': 'Obj', 'dataIndex': 'obj'}]],
            'tableDatas': [[{'obj': object()}]],
            'fileName': 'bad.xlsx',
        })
        self.worker.post_message({'type': MESSAGE_START, 'data': params}).result(timeout=30)

        self.assertEqual(len(self.messages), 1)
        self.assertEqual(self.messages[0]['type'], MESSAGE_ERROR)
        self.assertTrue(self.messages[0]['data'].startswith('export failed:'))

    def test_other_messages_are_ignored(self):
        self.worker.post_message({'type': 'ping'}).result(timeout=30)
        self.assertEqual(self.messages, [])

    def test_terminated_worker_rejects_messages(self):
        self.worker.terminate()
        with self.assertRaises(RuntimeError):
            self.worker.post_message({'type': MESSAGE_START, 'data': {}})


class TestCreateExportWorker(unittest.TestCase):

    def _params(self, **overrides):
        values = {'headerColumns': [COLUMNS], 'tableDatas': [RECORDS], 'fileName': 'users.xlsx', 'isWorker': True}
        values.update(overrides)
        return ExcelExportParams.model_validate(values)

    def test_worker_success_saves_file(self):
        save_file = MagicMock()
        notify_error = MagicMock()

        future = create_export_worker(self._params(), save_file=save_file, notify_error=notify_error)
        future.result(timeout=30)

        save_file.assert_called_once()
        data, file_name = save_file.call_args[0]
        self.assertIsInstance(data, bytes)
        self.assertEqual(file_name, 'users.xlsx')
        notify_error.assert_not_called()

    def test_worker_error_is_notified(self):
        save_file = MagicMock()
        notify_error = MagicMock()

        future = create_export_worker(self._params(fileName=None), save_file=save_file, notify_error=notify_error)
        future.result(timeout=30)

        notify_error.assert_called_once_with(FILE_NAME_REQUIRED_MESSAGE)
        save_file.assert_not_called()

    def _run_and_capture_worker(self, params, **callbacks):
        workers = []

        def make_worker(on_message):
            worker = ExportWorker(on_message)
            workers.append(worker)
            return worker

        with patch('table_excel.processors.export_worker.ExportWorker', side_effect=make_worker):
            future = create_export_worker(params, **callbacks)
        self.assertEqual(len(workers), 1)
        return future, workers[0]

    def _assert_terminated(self, worker):
        self.assertTrue(worker._terminated)
        with self.assertRaises(RuntimeError):
            worker.post_message({'type': MESSAGE_START, 'data': {}})

    def test_worker_is_terminated_after_success(self):
        future, worker = self._run_and_capture_worker(self._params(), save_file=MagicMock(), notify_error=MagicMock())
        future.result(timeout=30)
        self._assert_terminated(worker)

    def test_worker_is_terminated_after_error(self):
        notify_error = MagicMock()
        future, worker = self._run_and_capture_worker(
            self._params(fileName=None), save_file=MagicMock(), notify_error=notify_error,
        )
        future.result(timeout=30)
        notify_error.assert_called_once()
        self._assert_terminated(worker)

    def test_worker_is_terminated_when_save_fails(self):
        save_file = MagicMock(side_effect=OSError("disk full"))
        future, worker = self._run_and_capture_worker(self._params(), save_file=save_file, notify_error=MagicMock())

        with self.assertRaises(OSError):
            future.result(timeout=30)
        self._assert_terminated(worker)

    def test_without_worker_runs_inline(self):
        save_file = MagicMock()

        result = create_export_worker(self._params(isWorker=False), save_file=save_file)

        self.assertIsNone(result)
        save_file.assert_called_once()


if __name__ == '__main__':
    unittest.main()
