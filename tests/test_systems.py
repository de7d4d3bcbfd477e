"""
Tests for the bullet and enemy collections.
"""
from sideshooter.entities import Bullet, Enemy
from sideshooter.systems import BulletSystem, EnemySystem

CANVAS_WIDTH = 800


class TestCollectionBasics:
    """Tests for add/get/remove/size shared by both collections."""

    def test_starts_empty(self):
        bullets = BulletSystem()
        assert bullets.is_empty()
        assert bullets.size() == 0
        assert len(bullets) == 0

    def test_add_keeps_insertion_order(self):
        enemies = EnemySystem()
        first, second = Enemy(100, 0), Enemy(200, 0)
        enemies.add(first)
        enemies.add(second)

        assert enemies.size() == 2
        assert enemies.get(0) is first
        assert list(enemies)[1] is second

    def test_remove_by_index(self):
        enemies = EnemySystem()
        first, second = Enemy(100, 0), Enemy(200, 0)
        enemies.add(first)
        enemies.add(second)

        enemies.remove(0)

        assert enemies.size() == 1
        assert enemies.get(0) is second

    def test_clear(self):
        bullets = BulletSystem()
        bullets.add(Bullet(0, 0))
        bullets.clear()
        assert bullets.is_empty()

    def test_display_in_order(self):
        """Each bullet contributes one rect, in insertion order."""
        bullets = BulletSystem()
        bullets.add(Bullet(10, 0))
        bullets.add(Bullet(50, 0))
        shapes = bullets.display()
        assert [s.points[0][0] for s in shapes] == [10, 50]


class TestBulletUpdate:
    """Tests for bullet movement, exit and hits."""

    def test_bullet_advances(self):
        bullets = BulletSystem()
        bullets.add(Bullet(100, 100))
        assert bullets.update(EnemySystem(), CANVAS_WIDTH) == 0
        assert bullets.get(0).x == 105

    def test_bullet_removed_when_leading_edge_leaves(self):
        """Leading edge past the canvas: removed, and no hit that frame."""
        bullets = BulletSystem()
        enemies = EnemySystem()
        # After moving: x=781, leading edge 801
        bullets.add(Bullet(776, 315))
        # Enemy hull overlaps the bullet's post-move rect
        enemies.add(Enemy(770, 300))

        destroyed = bullets.update(enemies, CANVAS_WIDTH)

        assert destroyed == 0
        assert bullets.is_empty()
        assert enemies.size() == 1

    def test_bullet_at_edge_still_hits(self):
        """Leading edge exactly on the canvas edge keeps the bullet in play."""
        bullets = BulletSystem()
        enemies = EnemySystem()
        # After moving: x=780, leading edge 800
        bullets.add(Bullet(775, 315))
        enemies.add(Enemy(770, 300))

        assert bullets.update(enemies, CANVAS_WIDTH) == 1
        assert bullets.is_empty()
        assert enemies.is_empty()

    def test_hit_removes_bullet_and_enemy(self):
        bullets = BulletSystem()
        enemies = EnemySystem()
        bullets.add(Bullet(110, 315))
        enemies.add(Enemy(120, 300))

        assert bullets.update(enemies, CANVAS_WIDTH) == 1
        assert bullets.is_empty()
        assert enemies.is_empty()

    def test_one_enemy_per_bullet(self):
        """Two stacked enemies under one bullet: only the first is destroyed."""
        bullets = BulletSystem()
        enemies = EnemySystem()
        first, second = Enemy(120, 300), Enemy(120, 300)
        bullets.add(Bullet(110, 315))
        enemies.add(first)
        enemies.add(second)

        assert bullets.update(enemies, CANVAS_WIDTH) == 1
        assert enemies.size() == 1
        assert enemies.get(0) is second

    def test_consecutive_hits_are_all_counted(self):
        """Removing one bullet mid-pass does not skip the next one."""
        bullets = BulletSystem()
        enemies = EnemySystem()
        bullets.add(Bullet(110, 315))
        bullets.add(Bullet(110, 415))
        enemies.add(Enemy(120, 300))
        enemies.add(Enemy(120, 400))

        assert bullets.update(enemies, CANVAS_WIDTH) == 2
        assert bullets.is_empty()
        assert enemies.is_empty()

    def test_miss_leaves_both(self):
        bullets = BulletSystem()
        enemies = EnemySystem()
        bullets.add(Bullet(110, 100))
        enemies.add(Enemy(120, 300))

        assert bullets.update(enemies, CANVAS_WIDTH) == 0
        assert bullets.size() == 1
        assert enemies.size() == 1


class TestEnemyUpdate:
    """Tests for enemy movement and breaches."""

    def test_enemy_advances_while_inside(self):
        enemies = EnemySystem()
        enemies.add(Enemy(100, 0))
        assert enemies.update() == 0
        assert enemies.get(0).x == 98

    def test_enemy_at_left_edge_breaches(self):
        enemies = EnemySystem()
        enemies.add(Enemy(0, 0))
        assert enemies.update() == 1
        assert enemies.is_empty()

    def test_adjacent_breaches_are_all_counted(self):
        """Two enemies at the edge in a row both breach in the same frame."""
        enemies = EnemySystem()
        enemies.add(Enemy(0, 0))
        enemies.add(Enemy(-1, 100))
        enemies.add(Enemy(50, 200))

        assert enemies.update() == 2
        assert enemies.size() == 1
        assert enemies.get(0).x == 48

    def test_breach_takes_one_frame_after_reaching_edge(self):
        """Nose reaching x=0 is removed on the following frame."""
        enemies = EnemySystem()
        enemies.add(Enemy(2, 0))
        assert enemies.update() == 0
        assert enemies.get(0).x == 0
        assert enemies.update() == 1
