"""
Tests for index creation against databases that already hold indexes
"""
import pytest
from pymongo.errors import OperationFailure

from app.core.database import BRANDS, MODELS, VARIANTS, ensure_indexes


class _Collection:
    """Keeps indexes the way the server names and compares them"""

    def __init__(self, name):
        self.name = name
        self.indexes = {}
        self.calls = []

    def add_existing(self, keys, **options):
        self.indexes["_".join(f"{field}_{direction}" for field, direction in keys)] = (list(keys), options)

    async def create_index(self, keys, **options):
        self.calls.append(options)
        name = options.pop("name", None) or "_".join(f"{field}_{direction}" for field, direction in keys)
        for existing_name, (existing_keys, existing_options) in self.indexes.items():
            if existing_keys == list(keys) and existing_name != name:
                raise OperationFailure("Index already exists with a different name", code=85)
            if existing_name == name and existing_options != options:
                raise OperationFailure("An existing index has the same name but different options", code=86)
        self.indexes[name] = (list(keys), options)
        return name


class _Database:

    def __init__(self):
        self.collections = {name: _Collection(name) for name in (BRANDS, MODELS, VARIANTS)}

    def __getitem__(self, name):
        return self.collections[name]


@pytest.mark.asyncio
class TestEnsureIndexes:

    async def test_creates_indexes_under_default_names(self):
        db = _Database()

        await ensure_indexes(db)

        assert set(db[BRANDS].indexes) == {"name_1", "createdAt_-1"}
        assert set(db[MODELS].indexes) == {"brandId_1_name_1"}
        assert set(db[VARIANTS].indexes) == {"brandId_1", "modelId_1_name_1"}
        assert all("name" not in call for call in db[BRANDS].calls + db[MODELS].calls)

    async def test_existing_default_named_indexes_are_accepted(self):
        db = _Database()
        collation = {"locale": "en", "strength": 2}
        db[BRANDS].add_existing([("name", 1)], unique=True, collation=collation)
        db[MODELS].add_existing([("brandId", 1), ("name", 1)], unique=True, collation=collation)

        await ensure_indexes(db)

        assert db[BRANDS].indexes["name_1"] == ([("name", 1)], {"unique": True, "collation": collation})
        assert "brandId_1_name_1" in db[MODELS].indexes

    async def test_conflicting_existing_index_is_kept(self):
        db = _Database()
        db[BRANDS].add_existing([("name", 1)], unique=True)

        await ensure_indexes(db)

        assert db[BRANDS].indexes["name_1"] == ([("name", 1)], {"unique": True})
        assert "brandId_1_name_1" in db[MODELS].indexes

    async def test_other_failures_propagate(self):
        db = _Database()

        async def unauthorized(keys, **options):
            raise OperationFailure("not authorized", code=13)

        db[BRANDS].create_index = unauthorized

        with pytest.raises(OperationFailure):
            await ensure_indexes(db)
