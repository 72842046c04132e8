"""Tests for the entity registry and two-phase removal."""

import pytest

from space_shooter import EntityRegistry, GameConfig
from space_shooter.entities import Body, BodyKind, spawn_projectile


@pytest.fixture
def registry():
    return EntityRegistry()


class TestEntityRegistry:
    def test_ids_are_monotonic(self, registry):
        config = GameConfig()
        ids = [spawn_projectile(registry, config, 10.0, 10.0).id for _ in range(5)]
        assert ids == [0, 1, 2, 3, 4]

    def test_ids_not_reused_after_removal(self, registry):
        config = GameConfig()
        first = spawn_projectile(registry, config, 10.0, 10.0)
        registry.remove(first)
        registry.flush()

        second = spawn_projectile(registry, config, 10.0, 10.0)
        assert second.id > first.id

    def test_duplicate_add_rejected(self, registry):
        body = Body(id=registry.next_id(), kind=BodyKind.ENEMY, x=0.0, y=0.0)
        registry.add(body)
        with pytest.raises(ValueError):
            registry.add(body)

    def test_remove_is_deferred_until_flush(self, registry):
        body = registry.add(Body(id=registry.next_id(), kind=BodyKind.ENEMY, x=0.0, y=0.0))

        registry.remove(body)

        assert body in registry
        assert registry.is_pending_removal(body)

        registry.flush()

        assert body not in registry
        assert registry.pending_removal == []

    def test_double_remove_deletes_once(self, registry):
        keep = registry.add(Body(id=registry.next_id(), kind=BodyKind.ENEMY, x=0.0, y=0.0))
        drop = registry.add(Body(id=registry.next_id(), kind=BodyKind.ENEMY, x=0.0, y=0.0))

        registry.remove(drop)
        registry.remove(drop.id)

        assert registry.flush() == 1
        assert len(registry) == 1
        assert keep in registry

    def test_removing_flushed_id_is_noop(self, registry):
        body = registry.add(Body(id=registry.next_id(), kind=BodyKind.ENEMY, x=0.0, y=0.0))
        registry.remove(body)
        registry.flush()

        registry.remove(body)
        registry.remove(12345)

        assert registry.flush() == 0

    def test_snapshot_unaffected_by_later_adds(self, registry):
        config = GameConfig()
        spawn_projectile(registry, config, 10.0, 10.0)
        snapshot = registry.bodies()

        spawn_projectile(registry, config, 20.0, 20.0)

        assert len(snapshot) == 1
        assert len(registry) == 2

    def test_iteration_follows_insertion_order(self, registry):
        config = GameConfig()
        for x in (30.0, 10.0, 20.0):
            spawn_projectile(registry, config, x, 10.0)
        assert [b.x for b in registry] == [30.0, 10.0, 20.0]

    def test_of_kind_filters(self, registry):
        config = GameConfig()
        spawn_projectile(registry, config, 10.0, 10.0)
        registry.add(Body(id=registry.next_id(), kind=BodyKind.ENEMY, x=0.0, y=0.0))

        assert [b.kind for b in registry.of_kind(BodyKind.ENEMY)] == [BodyKind.ENEMY]
        assert len(registry.of_kind(BodyKind.ENEMY, BodyKind.PROJECTILE)) == 2
