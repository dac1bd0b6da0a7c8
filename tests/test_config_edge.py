"""
Test aggiuntivi per Config: deep-merge dei template e casi bordo.
"""
import tempfile
import os
import unittest
import yaml

from clock_duration.config import Config
from clock_duration.errors import ConfigError


class TestConfigEdge(unittest.TestCase):
    """Casi bordo su caricamento e merge configurazione"""

    def _write(self, content):
        with tempfile.NamedTemporaryFile('w+', suffix='.yaml', delete=False) as f:
            if isinstance(content, str):
                f.write(content)
            else:
                yaml.safe_dump(content, f)
            path = f.name
        self.addCleanup(os.unlink, path)
        return path

    def test_deep_merge_messages_partial_override(self):
        cfg = Config(self._write({'messages': {'error': 'ERR {message}'}}))
        self.assertEqual(cfg.render_error('Invalid hour 0'), 'ERR Invalid hour 0')
        # success resta quello di default
        self.assertEqual(cfg.render_success('0 hours 0 minutes'), 'Duration: 0 hours 0 minutes')

    def test_defaults_are_not_shared_between_instances(self):
        Config(self._write({'messages': {'success': 'X {duration}'}}))
        self.assertEqual(Config().get('messages')['success'], 'Duration: {duration}')

    def test_unknown_keys_are_preserved(self):
        cfg = Config(self._write({'unknown_key': 123}))
        self.assertEqual(cfg.get('unknown_key'), 123)

    def test_yaml_crlf_and_null_values(self):
        cfg = Config(self._write('strict_exit: true\r\nlog_level: null\r\n'))
        self.assertIs(cfg.get('strict_exit'), True)
        self.assertIsNone(cfg.get('log_level'))

    def test_template_with_unknown_placeholder_is_rejected(self):
        with self.assertRaises(ConfigError):
            Config(self._write({'messages': {'success': 'Took {elapsed}'}}))

    def test_template_that_is_not_a_string_is_rejected(self):
        with self.assertRaises(ConfigError):
            Config(self._write({'messages': {'error': 42}}))

    def test_messages_must_be_a_mapping(self):
        with self.assertRaises(ConfigError):
            Config(self._write({'messages': 'Duration: {duration}'}))

    def test_quoted_strict_exit_is_rejected(self):
        # "false" tra virgolette è una stringa, non un booleano
        with self.assertRaises(ConfigError) as ctx:
            Config(self._write('strict_exit: "false"\n'))
        self.assertIn("strict_exit", str(ctx.exception))
        with self.assertRaises(ConfigError):
            Config(self._write({'strict_exit': 1}))

    def test_log_level_must_be_a_name(self):
        with self.assertRaises(ConfigError):
            Config(self._write({'log_level': 10}))
        self.assertEqual(Config(self._write({'log_level': 'info'})).get('log_level'), 'info')

    def test_top_level_list_is_rejected(self):
        with self.assertRaises(ConfigError):
            Config(self._write('- a\n- b\n'))


if __name__ == '__main__':
    unittest.main()
