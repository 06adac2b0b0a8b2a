import pytest

from physics import Vector, Force
from gene import Gene
from entities import Life, Decorative, Resource


def test_decorative_is_passive_scenery():
    d = Decorative(Vector(1, 2), 10)
    force, offspring = d.next()
    assert force == Force.zero()
    assert offspring == []
    assert d.is_alive
    assert not d.is_depleted
    assert d.energy == 0
    assert d.gene.is_empty
    assert d.mass == pytest.approx(25 / 100)


def test_resource_never_acts(prey_gene):
    r = Resource(Vector(0, 0), prey_gene, 3, 50)
    assert not r.is_alive
    assert not r.is_depleted
    assert r.next() == (Force.zero(), [])
    assert r.gene is prey_gene
    assert r.energy == 50


def test_resource_eaten_is_idempotent(prey_gene):
    r = Resource(Vector(0, 0), prey_gene, 3, 50)
    assert r.eaten() == []
    assert r.energy == 0
    assert r.is_depleted
    assert r.eaten() == []
    assert r.energy == 0


def test_negative_size_and_energy_are_rejected(prey_gene):
    with pytest.raises(ValueError):
        Life(Vector(0, 0), -1)
    with pytest.raises(ValueError):
        Resource(Vector(0, 0), prey_gene, 3, -5)


def test_collision_is_circle_overlap():
    a = Life(Vector(0, 0), 4)
    b = Life(Vector(3.9, 0), 4)
    c = Life(Vector(4, 0), 4)
    assert a.is_colliding_with(b)
    assert not a.is_colliding_with(c)
