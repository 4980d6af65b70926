import pytest

from apps.core.updates import apply_updates, build_setters, select_updates


class Record:
    def __init__(self):
        self.name = 'old'
        self.code = None
        self.saved = 0

    def save(self):
        self.saved += 1


def _upper(record, value):
    record.code = value.upper()


SETTERS = build_setters(['name'], code=_upper)


def test_select_updates_drops_unknown_keys():
    assert select_updates({'name': 'x', 'id': 1}, SETTERS) == {'name': 'x'}


def test_apply_updates_uses_setters_and_saves():
    record = Record()

    apply_updates(record, {'name': 'new', 'code': 'ab', 'id': 9}, SETTERS)

    assert record.name == 'new'
    assert record.code == 'AB'
    assert record.saved == 1
    assert not hasattr(record, 'id')


def test_apply_updates_without_allowed_fields():
    record = Record()

    with pytest.raises(ValueError, match='No valid fields'):
        apply_updates(record, {'id': 9}, SETTERS)

    assert record.saved == 0
