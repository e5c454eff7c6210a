import pytest

from src.platform.logging.loguru_io_utils import (
    MASK,
    mask_sensitive,
    should_mask_keyword,
    truncate_content,
)
from src.platform.logging.loguru_io_config import MAX_CONTENT_LENGTH


@pytest.mark.unit
class TestMaskSensitive:
    def test_masks_token_in_repr(self):
        masked = mask_sensitive("JwtPayload(token='abc.def.ghi', role='admin')")

        assert 'abc.def.ghi' not in masked
        assert MASK in masked
        assert "role='admin'" in masked

    def test_masks_dict_style_values(self):
        masked = mask_sensitive({'Authorization': 'Bearer xyz', 'event_id': 1})

        assert 'Bearer xyz' not in masked

    def test_leaves_plain_data_untouched(self):
        data = {'event_id': 1, 'amount': 30}

        assert mask_sensitive(data) is data

    def test_should_mask_keyword(self):
        assert should_mask_keyword('password', 'secret-value') == MASK
        assert should_mask_keyword('amount', 30) == 30


@pytest.mark.unit
class TestTruncateContent:
    def test_short_content_is_kept(self):
        assert truncate_content('short') == 'short'

    def test_long_content_is_cut(self):
        truncated = truncate_content('x' * (MAX_CONTENT_LENGTH + 20))

        assert truncated.startswith('x' * MAX_CONTENT_LENGTH)
        assert truncated.endswith('(+20 chars)')
