# Tests for recent search history and its stores

import json

import pytest
from retailsearch.errors import StorageError
from retailsearch.recent_searches import STORAGE_KEY, RecentSearchStore
from retailsearch.storage import MemoryStore, SQLiteStore


class FailingStore:
    """Store whose reads and/or writes fail"""

    def __init__(self, fail_get=False, fail_set=True):
        self.fail_get = fail_get
        self.fail_set = fail_set

    def get(self, key):
        if self.fail_get:
            raise StorageError('disk unavailable')
        return None

    def set(self, key, value):
        if self.fail_set:
            raise StorageError('disk full')


class TestRecentSearchStore:
    """Test recent search list"""

    def setup_method(self):
        self.storage = MemoryStore()
        self.recent = RecentSearchStore(self.storage, max_entries=3)

    def test_starts_empty(self):
        """Test new store has no entries"""
        assert self.recent.list() == []

    def test_newest_first(self):
        """Test most recent query is at the front"""
        self.recent.record('milk')
        self.recent.record('bread')

        assert self.recent.list() == ['bread', 'milk']

    def test_case_insensitive_dedupe(self):
        """Test repeating a query moves it to the front once"""
        self.recent.record('Apple')
        self.recent.record('banana')
        self.recent.record('APPLE')

        assert self.recent.list() == ['APPLE', 'banana']

    def test_drops_oldest_beyond_max(self):
        """Test list is capped at max_entries"""
        for query in ['a', 'b', 'c', 'd']:
            self.recent.record(query)

        assert self.recent.list() == ['d', 'c', 'b']

    def test_blank_query_ignored(self):
        """Test blank queries are not recorded or persisted"""
        self.recent.record('   ')
        self.recent.record('')

        assert self.recent.list() == []
        assert self.storage.get(STORAGE_KEY) is None

    def test_persisted_as_json(self):
        """Test full list is written after every record"""
        self.recent.record('tea')
        self.recent.record('milk')

        assert json.loads(self.storage.get(STORAGE_KEY)) == ['milk', 'tea']

    def test_reloads_from_storage(self):
        """Test a new store picks up the saved list"""
        self.recent.record('tea')

        reloaded = RecentSearchStore(self.storage, max_entries=3)

        assert reloaded.list() == ['tea']

    def test_list_is_a_copy(self):
        """Test callers cannot mutate the stored list"""
        self.recent.record('tea')
        self.recent.list().append('junk')

        assert self.recent.list() == ['tea']

    def test_clear(self):
        """Test clearing empties and persists"""
        self.recent.record('tea')
        self.recent.clear()

        assert self.recent.list() == []
        assert json.loads(self.storage.get(STORAGE_KEY)) == []

    @pytest.mark.parametrize('payload', ['not json', '{"a": 1}', '42', ''])
    def test_malformed_payload_is_empty(self, payload):
        """Test unusable stored values are treated as empty"""
        recent = RecentSearchStore(MemoryStore({STORAGE_KEY: payload}))

        assert recent.list() == []

    def test_non_string_entries_dropped(self):
        """Test only string entries survive loading"""
        recent = RecentSearchStore(MemoryStore({STORAGE_KEY: '["tea", 3, null, "milk"]'}))

        assert recent.list() == ['tea', 'milk']

    def test_loaded_duplicates_collapsed(self):
        """Test stored entries differing only in case keep the newest"""
        payload = json.dumps(['Tea', 'milk', 'tea', 'MILK', 'bread'])
        recent = RecentSearchStore(MemoryStore({STORAGE_KEY: payload}), max_entries=3)

        assert recent.list() == ['Tea', 'milk', 'bread']

    def test_read_failure_is_empty(self):
        """Test a failing read starts with an empty list"""
        recent = RecentSearchStore(FailingStore(fail_get=True, fail_set=False))

        assert recent.list() == []

    def test_write_failure_raises_after_update(self):
        """Test write failures reach the caller, list still updated"""
        recent = RecentSearchStore(FailingStore())

        with pytest.raises(StorageError):
            recent.record('tea')

        assert recent.list() == ['tea']


class TestSQLiteStore:
    """Test SQLite key-value store"""

    def test_get_missing(self, tmp_path):
        """Test unknown key returns None"""
        store = SQLiteStore(str(tmp_path / 'search.db'))

        assert store.get('nothing') is None

    def test_set_and_overwrite(self, tmp_path):
        """Test values are stored and replaced"""
        store = SQLiteStore(str(tmp_path / 'search.db'))

        store.set('k', 'one')
        store.set('k', 'two')

        assert store.get('k') == 'two'

    def test_survives_reopen(self, tmp_path):
        """Test recent searches persist across store instances"""
        db_path = str(tmp_path / 'search.db')
        RecentSearchStore(SQLiteStore(db_path)).record('Organic Milk')

        recent = RecentSearchStore(SQLiteStore(db_path))

        assert recent.list() == ['Organic Milk']

    def test_unopenable_path(self, tmp_path):
        """Test a bad database path raises StorageError"""
        with pytest.raises(StorageError):
            SQLiteStore(str(tmp_path / 'missing' / 'search.db'))
