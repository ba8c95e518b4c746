import math

import pytest

from sosyalag.network import (
    MAX_FRIENDS,
    MAX_NAME_LENGTH,
    USER_NAME_PREFIX,
    CapacityError,
    NetworkError,
    SocialNetwork,
    UserNotFoundError,
)


def build(user_ids, friendships=()):
    network = SocialNetwork()
    for user_id in user_ids:
        network.add_user(user_id, f"{USER_NAME_PREFIX}{user_id}")
    for a, b in friendships:
        network.add_friendship(a, b)
    return network


def ids(users):
    return [user.id for user in users]


def test_add_user_and_lookup():
    network = build([5, 3, 8])
    assert len(network) == 3
    assert 3 in network
    assert 4 not in network
    assert network.user(8).name == "Kullanici8"


def test_long_name_is_truncated():
    network = SocialNetwork()
    user = network.add_user(1, "x" * 80)
    assert len(user.name) == MAX_NAME_LENGTH - 1


def test_user_capacity():
    network = SocialNetwork(max_users=2)
    network.add_user(1, "a")
    network.add_user(2, "b")
    with pytest.raises(CapacityError):
        network.add_user(3, "c")
    assert len(network) == 2


def test_missing_user_raises():
    network = build([1])
    with pytest.raises(UserNotFoundError):
        network.user(2)
    with pytest.raises(UserNotFoundError):
        network.add_friendship(1, 2)
    assert issubclass(UserNotFoundError, NetworkError)


def test_friendship_is_mutual():
    network = build([1, 2], [(1, 2)])
    assert network.user(2) in network.user(1).friends
    assert network.user(1) in network.user(2).friends


def test_friend_capacity():
    network = build(range(1, MAX_FRIENDS + 3))
    for other in range(2, MAX_FRIENDS + 2):
        network.add_friendship(1, other)
    with pytest.raises(CapacityError):
        network.add_friendship(1, MAX_FRIENDS + 2)
    assert network.user(1).friend_count == MAX_FRIENDS
    assert network.user(MAX_FRIENDS + 2).friend_count == 0


def test_in_order_and_spine():
    network = build([7, 2, 9, 1, 5, 10, 3, 8, 6, 4])
    assert ids(network.users_in_order()) == sorted(range(1, 11))
    spine = ids(network.spine_users())
    assert spine[0] == network.tree.root.key
    assert spine[-1] == 10
    assert spine == sorted(spine)


def test_friends_at_distance_on_path():
    network = build([1, 2, 3, 4], [(1, 2), (2, 3), (3, 4)])
    assert ids(network.friends_at_distance(1, 2)) == [3]
    assert ids(network.friends_at_distance(1, 3)) == [4]
    assert network.friends_at_distance(1, 0) == []


def test_friends_at_distance_follows_depth_first_order():
    network = build([1, 2, 3], [(1, 2), (1, 3), (2, 3)])
    assert ids(network.friends_at_distance(1, 1)) == [2, 3]
    assert ids(network.friends_at_distance(1, 2)) == [3]


def test_friends_at_distance_missing_user():
    with pytest.raises(UserNotFoundError):
        build([1]).friends_at_distance(9, 1)


def test_common_friends():
    network = build([1, 2, 3, 4, 5], [(1, 3), (2, 3), (1, 4), (2, 4), (1, 5)])
    assert ids(network.common_friends(1, 2)) == [3, 4]
    assert network.common_friends(1, 5) == []


def test_communities_of_isolated_users():
    network = build([1, 2])
    communities = network.communities()
    assert [c.number for c in communities] == [1, 2]
    assert [c.size for c in communities] == [1, 1]
    assert all(c.density == 0.0 for c in communities)


def test_community_discovery_order():
    network = build([1, 2, 3], [(1, 2), (1, 3), (2, 3)])
    communities = network.communities()
    assert len(communities) == 1
    assert ids(communities[0].members) == [2, 1, 3]
    assert communities[0].density > 0


def test_communities_are_disjoint_and_connected():
    network = build(range(1, 9), [(1, 2), (2, 3), (4, 5), (6, 7), (7, 8), (8, 6)])
    communities = network.communities()
    seen = [user.id for c in communities for user in c.members]
    assert len(seen) == len(set(seen))
    for community in communities:
        member_ids = set(ids(community.members))
        for user in community.members:
            assert {f.id for f in user.friends} <= member_ids


def test_influence_score_of_pair():
    network = build([1, 2], [(1, 2)])
    assert network.influence_score(1) == pytest.approx(0.454)
    assert network.influence_score(1) == pytest.approx(network.influence_score(2))


def test_influence_score_without_friends_is_nan():
    network = build([1, 2, 3], [(2, 3)])
    score = network.influence_score(1)
    assert str(score) == "nan"
    assert math.isnan(score)
    assert network.influence_score(2) == pytest.approx(0.454)


def test_influence_score_missing_user():
    with pytest.raises(UserNotFoundError):
        build([1]).influence_score(3)


def test_ranked_by_influence_is_descending():
    network = build(range(1, 7), [(1, 2), (1, 3), (1, 4), (2, 3), (5, 6), (4, 5)])
    ranked = network.ranked_by_influence()
    scores = [score for _, score in ranked]
    assert len(ranked) == 6
    assert scores == sorted(scores, reverse=True)
    assert sorted(ids(user for user, _ in ranked)) == list(range(1, 7))


def test_most_influential_shows_top_and_bottom():
    pairs = [(i, i + 1) for i in range(1, 7)]
    network = build(range(1, 8), pairs)
    result = network.most_influential(5)
    assert [rank for rank, _, _ in result] == [1, 2, 3, 6, 7]
    ranked = network.ranked_by_influence()
    assert result[0][1] is ranked[0][0]
    assert result[-1][1] is ranked[-1][0]


def test_most_influential_small_network():
    network = build([1, 2, 3], [(1, 2), (2, 3)])
    result = network.most_influential(5)
    assert [rank for rank, _, _ in result] == [1, 2, 3]


def test_most_influential_rejects_bad_count():
    with pytest.raises(ValueError):
        build([1]).most_influential(0)


def test_load_skips_comments_and_uses_generated_names(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text(
        "# sample\n\nUSER 4 Alice\nUSER 6 Bob\nFRIEND Kullanici4 Kullanici6\nFRIEND Alice Bob\n",
        encoding="utf-8",
    )
    network = SocialNetwork()
    network.load_dataset(path)
    assert len(network) == 2
    assert network.user(4).name == "Kullanici4"
    assert ids(network.user(4).friends) == [6]


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        SocialNetwork().load_dataset(tmp_path / "absent.txt")