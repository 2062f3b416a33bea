import logging
import unittest

from apps.common import get_logger


class AppLoggerTests(unittest.TestCase):
    def test_bind_merges_context_without_mutating_parent(self):
        base = get_logger('apps.catalog.tests').bind(component='catalog')
        child = base.bind(layer='service')
        self.assertEqual(base.context, {'component': 'catalog'})
        self.assertEqual(child.context, {'component': 'catalog', 'layer': 'service'})

    def test_records_render_bound_and_call_context(self):
        log = get_logger('apps.catalog.tests').bind(component='catalog', layer='service')
        with self.assertLogs('apps.catalog.tests', level='INFO') as captured:
            log.info('Product created', product_id=3)
        self.assertEqual(
            captured.records[0].getMessage(),
            'Product created | component=catalog layer=service product_id=3',
        )

    def test_plain_message_without_context(self):
        with self.assertLogs('apps.catalog.plain', level='WARNING') as captured:
            get_logger('apps.catalog.plain').warning('Careful')
        self.assertEqual(captured.records[0].getMessage(), 'Careful')

    def test_exception_attaches_traceback(self):
        log = get_logger('apps.catalog.tests')
        with self.assertLogs('apps.catalog.tests', level='ERROR') as captured:
            try:
                raise RuntimeError('boom')
            except RuntimeError:
                log.exception('Failed', step='save')
        record = captured.records[0]
        self.assertEqual(record.levelno, logging.ERROR)
        self.assertIsNotNone(record.exc_info)
        self.assertEqual(record.getMessage(), 'Failed | step=save')
