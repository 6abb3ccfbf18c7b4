"""
Tests for ID generation utilities.

Tests cover:
1. Timestamp prefix format
2. Random suffix alphabet and length
3. Uniqueness guarantees
"""

from datetime import datetime

from alpsvault.utils import generate_vault_id
from alpsvault.utils.id_generator import ID_SUFFIX_ALPHABET, ID_SUFFIX_LENGTH


class TestGenerateVaultId:
    """Tests for vault entity ID generation."""

    def test_format(self):
        """Test ID format: YYYYMMDDHHMMSS + 5 base-36 chars."""
        vault_id = generate_vault_id(datetime(2024, 7, 28, 14, 30, 15))

        assert vault_id.startswith("20240728143015")
        assert len(vault_id) == 14 + ID_SUFFIX_LENGTH

    def test_suffix_alphabet(self):
        """Test suffix uses only lowercase letters and digits."""
        for _ in range(100):
            suffix = generate_vault_id()[14:]
            assert all(ch in ID_SUFFIX_ALPHABET for ch in suffix)

    def test_default_uses_current_time(self):
        """Test the prefix comes from the current time when none is given."""
        before = datetime.now().strftime("%Y%m%d")
        vault_id = generate_vault_id()

        assert vault_id[:8] >= before
        assert vault_id[:14].isdigit()

    def test_uniqueness(self):
        """Test that IDs generated within the same second are unique."""
        now = datetime.now()
        ids = [generate_vault_id(now) for _ in range(1000)]
        assert len(ids) == len(set(ids))
