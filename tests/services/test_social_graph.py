from datetime import timedelta

import pytest

from mediagraph.domain.entities.person import Person
from mediagraph.domain.enums import EntityKind
from mediagraph.domain.errors import IntegrityViolation, InvalidError, NotFoundError


def _ids(people):
    return [p.id for p in people]


@pytest.fixture()
def trio(graph, make_person):
    return [graph.create(make_person(login)).id for login in ("ann", "bob", "cid")]


# ---- lifecycle ----

def test_blank_name_defaults_to_login(graph, make_person):
    created = graph.create(make_person("dolore", name=""))
    assert created.id == 1
    assert created.name == "dolore"
    assert graph.get(1).name == "dolore"


def test_create_then_get_returns_equal_value(graph, make_person):
    created = graph.create(make_person())
    assert graph.get(created.id) == created
    assert created.friends == set()


def test_create_rejects_future_birthday(graph, make_person, today):
    with pytest.raises(InvalidError):
        graph.create(make_person(birthday=today + timedelta(days=1)))
    assert graph.create(make_person(birthday=today)).id == 1


def test_create_rejects_bad_email_and_login(graph, make_person):
    with pytest.raises(InvalidError):
        graph.create(make_person(email="no-at-sign"))
    with pytest.raises(InvalidError):
        graph.create(make_person(login="has space"))
    assert graph.list() == []


def test_update_replaces_fields_keeps_friends(graph, trio):
    a, b, _ = trio
    graph.befriend(a, b)
    upd = graph.update(Person(id=a, email="new@mail.ru", login="ann2", name=" "))
    assert upd.email == "new@mail.ru"
    assert upd.name == "ann2"
    assert upd.birthday is None
    assert upd.friends == {b}


@pytest.mark.parametrize("bad_id", [None, 42])
def test_update_unknown_is_not_found(graph, make_person, bad_id):
    with pytest.raises(NotFoundError) as ei:
        graph.update(make_person(id=bad_id))
    assert ei.value.kind is EntityKind.person


def test_exists(graph, trio):
    assert graph.exists(trio[0]) is True
    assert graph.exists(99) is False


# ---- friendship ----

def test_befriend_then_unfriend_scenario(graph, trio):
    a, b, _ = trio
    graph.befriend(a, b)
    assert _ids(graph.friends_of(a)) == [b]
    assert _ids(graph.friends_of(b)) == [a]

    graph.unfriend(a, b)
    assert graph.friends_of(a) == []
    assert graph.friends_of(b) == []


def test_befriend_and_unfriend_are_idempotent(graph, trio):
    a, b, _ = trio
    graph.befriend(a, b)
    graph.befriend(a, b)
    graph.befriend(b, a)
    assert graph.get(a).friends == {b}
    assert graph.get(b).friends == {a}

    graph.unfriend(a, b)
    graph.unfriend(a, b)
    assert graph.get(a).friends == set()


def test_befriend_self_is_invalid(graph, trio):
    with pytest.raises(InvalidError):
        graph.befriend(trio[0], trio[0])
    assert graph.get(trio[0]).friends == set()


def test_befriend_unknown_is_not_found_and_changes_nothing(graph, trio):
    with pytest.raises(NotFoundError):
        graph.befriend(trio[0], 99)
    with pytest.raises(NotFoundError):
        graph.befriend(99, trio[0])
    with pytest.raises(NotFoundError):
        graph.unfriend(trio[0], 99)
    assert graph.get(trio[0]).friends == set()


def test_friends_of_unknown_is_not_found(graph):
    with pytest.raises(NotFoundError):
        graph.friends_of(1)


def test_common_friends(graph, trio):
    a, b, c = trio
    graph.befriend(a, c)
    assert graph.common_friends(a, b) == []

    graph.befriend(b, c)
    common = graph.common_friends(a, b)
    assert _ids(common) == [c]
    assert _ids(graph.common_friends(b, a)) == [c]


def test_common_friends_matches_intersection(graph, make_person):
    ids = [graph.create(make_person(f"p{i}")).id for i in range(8)]
    a, b = ids[0], ids[1]
    for other in ids[2:6]:
        graph.befriend(a, other)
    for other in ids[4:8]:
        graph.befriend(b, other)

    expected = set(_ids(graph.friends_of(a))) & set(_ids(graph.friends_of(b)))
    assert _ids(graph.common_friends(a, b)) == sorted(expected) == ids[4:6]


def test_common_friends_unknown_is_not_found(graph, trio):
    with pytest.raises(NotFoundError):
        graph.common_friends(trio[0], 77)


def test_remove_strips_both_sides(graph, trio):
    a, b, c = trio
    graph.befriend(a, b)
    graph.befriend(a, c)
    removed = graph.remove(a)
    assert removed.friends == {b, c}
    assert graph.get(b).friends == set()
    assert graph.get(c).friends == set()
    with pytest.raises(NotFoundError):
        graph.get(a)


def test_dangling_friend_id_is_an_integrity_violation(graph, trio):
    # corrupt the store directly; the public API can't produce this state
    store = graph._store
    store.get(trio[0]).friends.add(999)
    with pytest.raises(IntegrityViolation):
        graph.friends_of(trio[0])
    with pytest.raises(AssertionError):
        graph.friends_of(trio[0])


def test_remove_with_dangling_friend_changes_nothing(graph, trio):
    a, b, _ = trio
    graph.befriend(a, b)
    # a dangling id that sorts after b, so b would be touched first by a naive loop
    graph._store.get(a).friends.add(999)
    with pytest.raises(IntegrityViolation):
        graph.remove(a)
    assert graph.exists(a)
    assert graph.get(b).friends == {a}
    assert graph.get(a).friends == {b, 999}


def test_count_tracks_creates_and_removals(graph, trio):
    assert graph.count() == 3
    graph.remove(trio[1])
    assert graph.count() == 2
