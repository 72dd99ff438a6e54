"""
tests/test_config.py
JSON config and the database name table.
"""

import json
import logging

from pagerbackup.backup import PagerBackup
from pagerbackup.config import CONFIG_FILENAME, DEFAULT_CONFIG, load_config, save_config
from pagerbackup.databases import (
    DEFAULT_DATABASE_KINDS,
    RecordKind,
    kind_for_database,
    parse_database_kinds,
)
from pagerbackup.records import Contact, Memo, UnrecognizedRecord


class TestDatabaseTable:

    def test_default_names(self):
        assert kind_for_database('SMS Messages') is RecordKind.SMS
        assert kind_for_database('Address Book') is RecordKind.CONTACT
        assert kind_for_database('Quick Contacts') is RecordKind.CONTACT
        assert kind_for_database('Phone Call Logs') is RecordKind.CALLLOG

    def test_match_is_exact(self):
        assert kind_for_database('sms messages') is RecordKind.UNRECOGNIZED
        assert kind_for_database('SMS Messages ') is RecordKind.UNRECOGNIZED

    def test_every_name_gets_a_kind(self):
        assert kind_for_database('') is RecordKind.UNRECOGNIZED

    def test_explicit_table(self):
        assert kind_for_database('Memos', {}) is RecordKind.UNRECOGNIZED

    def test_parse_skips_unknown_kinds(self, caplog):
        with caplog.at_level(logging.WARNING, logger='pagerbackup.databases'):
            table = parse_database_kinds({'Notes': 'memo', 'Calendar': 'calendar'})
        assert table == {'Notes': RecordKind.MEMO}
        assert 'Calendar' in caplog.text


class TestConfigFile:

    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path)
        assert config == DEFAULT_CONFIG
        assert parse_database_kinds(config['database_kinds']) == DEFAULT_DATABASE_KINDS

    def test_defaults_not_shared(self, tmp_path):
        config = load_config(tmp_path)
        config['database_kinds']['Extra'] = 'memo'
        assert 'Extra' not in DEFAULT_CONFIG['database_kinds']

    def test_round_trip(self, tmp_path):
        config = load_config(tmp_path)
        config['line_feed'] = '\r'
        path = save_config(config, tmp_path)
        assert path.name == CONFIG_FILENAME
        assert load_config(tmp_path)['line_feed'] == '\r'

    def test_partial_file_merged_over_defaults(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text(json.dumps({'version': 4}), encoding='utf-8')
        config = load_config(tmp_path)
        assert config['version'] == 4
        assert config['line_feed'] == '\n'

    def test_bad_json_gives_defaults(self, tmp_path, caplog):
        (tmp_path / CONFIG_FILENAME).write_text('{not json', encoding='utf-8')
        with caplog.at_level(logging.WARNING, logger='pagerbackup.config'):
            config = load_config(tmp_path)
        assert config == DEFAULT_CONFIG
        assert 'Config load failed' in caplog.text

    def test_non_object_json_gives_defaults(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text('[1, 2]', encoding='utf-8')
        assert load_config(tmp_path) == DEFAULT_CONFIG


class TestBackupFromConfig:

    def test_table_replaced(self, tmp_path):
        config = load_config(tmp_path)
        config['database_kinds'] = {'Notes': 'memo', 'Contacts': 'contact'}
        config['version'] = 5
        b = PagerBackup.from_config(config)
        for name in ('Notes', 'Contacts', 'Memos'):
            b.add_database(name)
        assert isinstance(b.create_record(0, 1, 1, 10), Memo)
        assert isinstance(b.create_record(1, 1, 2, 10), Contact)
        assert isinstance(b.create_record(2, 1, 3, 10), UnrecognizedRecord)
        assert b.version == 5

    def test_non_object_table_gives_defaults(self, caplog):
        with caplog.at_level(logging.WARNING, logger='pagerbackup.databases'):
            b = PagerBackup.from_config({'database_kinds': ['Memos']})
        assert 'not an object' in caplog.text
        b.add_database('Memos')
        b.add_database('Quick Contacts')
        assert isinstance(b.create_record(0, 1, 1, 10), Memo)
        assert isinstance(b.create_record(1, 1, 2, 10), Contact)

    def test_parse_non_mapping(self):
        assert parse_database_kinds('Memos') == DEFAULT_DATABASE_KINDS

    def test_defaults(self, tmp_path):
        b = PagerBackup.from_config(load_config(tmp_path))
        b.add_database('Memos')
        assert isinstance(b.create_record(0, 1, 1, 10), Memo)
        assert b.line_feed == '\n'
