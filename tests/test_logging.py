"""
Unit Tests for Logging Utilities
"""
import logging

from ae_lingo.utils.logging import LogBuffer, BufferHandler


class TestLogBuffer:

    def test_entries_since_id(self):
        buffer = LogBuffer(max_size=10)
        first = buffer.add('INFO', 'APP', 'one')
        buffer.add('WARNING', 'API', 'two')

        assert [e['message'] for e in buffer.entries()] == ['one', 'two']
        assert [e['message'] for e in buffer.entries(first['id'])] == ['two']

    def test_bounded(self):
        buffer = LogBuffer(max_size=2)
        for n in range(5):
            buffer.add('INFO', 'APP', str(n))
        assert [e['message'] for e in buffer.entries()] == ['3', '4']

    def test_clear_restarts_ids(self):
        buffer = LogBuffer(max_size=10)
        buffer.add('INFO', 'APP', 'one')
        buffer.clear()

        assert buffer.entries() == []
        assert buffer.add('INFO', 'APP', 'two')['id'] == 1


class TestBufferHandler:

    def test_only_warnings_are_mirrored(self):
        buffer = LogBuffer(max_size=10)
        logger = logging.getLogger('ae_lingo.test.buffer')
        logger.setLevel(logging.DEBUG)
        handler = BufferHandler(buffer, 'TEST')
        logger.addHandler(handler)
        try:
            logger.info("routine")
            logger.warning("fallback used")
        finally:
            logger.removeHandler(handler)

        entries = buffer.entries()
        assert len(entries) == 1
        assert entries[0]['level'] == 'WARNING'
        assert entries[0]['source'] == 'TEST'
        assert entries[0]['message'] == 'fallback used'
