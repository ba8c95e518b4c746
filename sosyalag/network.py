"""A social network of users and friendships indexed by a red-black tree."""

from __future__ import annotations

import math
import os
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterator

from .rbtree import RedBlackTree

MAX_USERS = 100
MAX_NAME_LENGTH = 50
MAX_FRIENDS = 50
USER_NAME_PREFIX = "Kullanici"

_USER_LINE = re.compile(r"USER\s*([+-]?\d+)")
_NAME_ID = re.compile(USER_NAME_PREFIX + r"([+-]?\d+)")


class NetworkError(Exception):
    """Base class for errors raised by a social network."""


class UserNotFoundError(NetworkError, LookupError):
    """A requested user id is not in the network."""


class CapacityError(NetworkError):
    """A user or friendship limit has been reached."""


@dataclass(eq=False)
class User:
    """A member of the network and the users they are friends with."""

    id: int
    name: str
    friends: list["User"] = field(default_factory=list, repr=False)

    @property
    def friend_count(self) -> int:
        return len(self.friends)


@dataclass(frozen=True)
class Community:
    """A group of users reachable from one another through friendships."""

    number: int
    members: tuple[User, ...]
    density: float

    @property
    def size(self) -> int:
        return len(self.members)


class SocialNetwork:
    """Users stored in a red-black tree, linked by mutual friendships."""

    def __init__(self, max_users: int = MAX_USERS) -> None:
        self.max_users = max_users
        self.tree: RedBlackTree[User] = RedBlackTree()

    def __len__(self) -> int:
        return len(self.tree)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self.tree

    def add_user(self, user_id: int, name: str) -> User:
        """Add a user; names longer than the limit are truncated."""
        if len(self.tree) >= self.max_users:
            raise CapacityError("maximum number of users reached")
        user = User(user_id, name[: MAX_NAME_LENGTH - 1])
        self.tree.insert(user_id, user)
        return user

    def user(self, user_id: int) -> User:
        """Return the user with ``user_id``."""
        node = self.tree.find(user_id)
        if node is None:
            raise UserNotFoundError(f"user {user_id} not found")
        return node.value

    def add_friendship(self, user_id1: int, user_id2: int) -> None:
        """Record a mutual friendship between two users."""
        first = self.user(user_id1)
        second = self.user(user_id2)
        if first.friend_count >= MAX_FRIENDS or second.friend_count >= MAX_FRIENDS:
            raise CapacityError("maximum number of friends reached")
        first.friends.append(second)
        second.friends.append(first)

    def spine_users(self) -> Iterator[User]:
        """Yield the users on the tree's right spine, starting at the root."""
        return (node.value for node in self.tree.right_spine())

    def users_in_order(self) -> Iterator[User]:
        """Yield every user in ascending id order."""
        return (node.value for node in self.tree)

    def friends_at_distance(self, user_id: int, distance: int) -> list[User]:
        """Users first reached at exactly ``distance`` steps by a depth-first walk."""
        start = self.user(user_id)
        visited: set[int] = set()
        found: list[User] = []

        def visit(current: User, depth: int) -> None:
            if depth > distance:
                return
            visited.add(current.id)
            if depth == distance and current.id != user_id:
                found.append(current)
            for friend in current.friends:
                if friend.id not in visited:
                    visit(friend, depth + 1)

        visit(start, 0)
        return found

    def common_friends(self, user_id1: int, user_id2: int) -> list[User]:
        """Friends of the first user who are also friends of the second."""
        first = self.user(user_id1)
        second = self.user(user_id2)
        second_ids = {friend.id for friend in second.friends}
        return [friend for friend in first.friends if friend.id in second_ids]

    def communities(self) -> list[Community]:
        """Connected groups found from the users on the right spine."""
        assignment: dict[int, int] = {}
        groups: list[list[User]] = []
        for start in self.spine_users():
            if start.id in assignment:
                continue
            number = len(groups) + 1
            assignment[start.id] = number
            members = [start]
            stack = [start]
            while stack:
                current = stack.pop()
                for friend in current.friends:
                    if friend.id not in assignment:
                        assignment[friend.id] = number
                        members.append(friend)
                        stack.append(friend)
            groups.append(members)

        sizes = Counter(assignment.values())
        totals = [0.0] * (len(groups) + 1)
        for user in self.spine_users():
            number = assignment[user.id]
            inner = sum(1 for friend in user.friends if assignment.get(friend.id) == number)
            size = sizes[number]
            possible = size * (size - 1) // 2
            if possible > 0:
                totals[number] += inner / possible

        return [
            Community(number, tuple(members), totals[number] / sizes[number])
            for number, members in enumerate(groups, start=1)
        ]

    def influence_score(self, user_id: int) -> float:
        """Weighted influence score of a user; NaN for a user with no friends."""
        user = self.user(user_id)
        count = user.friend_count

        most_friends = max((u.friend_count for u in self.spine_users()), default=0)
        direct = count / most_friends if most_friends > 0 else 0.0

        seen = {user_id}
        second_degree = 0
        for friend in user.friends:
            seen.add(friend.id)
            for other in friend.friends:
                if other.id not in seen:
                    second_degree += 1
                    seen.add(other.id)
        reach = second_degree / (MAX_USERS - 1)

        circle = {user_id} | {friend.id for friend in user.friends}
        inner = sum(
            1 for friend in user.friends for other in friend.friends if other.id in circle
        )
        possible = count * (count + 1)
        community = inner / possible if possible else math.nan

        centrality = 0.0
        if count > 0:
            links = sum(friend.friend_count for friend in user.friends)
            centrality = links / (count * MAX_FRIENDS)

        return direct * 0.3 + reach * 0.2 + community * 0.3 + centrality * 0.2

    def ranked_by_influence(self) -> list[tuple[User, float]]:
        """All users with their scores, highest score first; ties keep id order."""
        scored = [(user, self.influence_score(user.id)) for user in self.users_in_order()]
        return sorted(scored, key=lambda pair: pair[1], reverse=True)

    def most_influential(self, count: int) -> list[tuple[int, User, float]]:
        """Ranked users as (rank, user, score).

        With more than five users only the top three and the bottom two are
        returned; otherwise every user is.
        """
        if count <= 0:
            raise ValueError("count must be positive")
        ranked = [(rank, user, score) for rank, (user, score) in
                  enumerate(self.ranked_by_influence(), start=1)]
        if len(ranked) > 5:
            return ranked[:3] + ranked[-2:]
        return ranked

    def save_dataset(self, path: str | os.PathLike[str]) -> None:
        """Write the spine users and their friendships as USER and FRIEND lines."""
        with open(path, "w", encoding="utf-8") as handle:
            for user in self.spine_users():
                handle.write(f"USER {user.id} {user.name}\n")
            for user in self.spine_users():
                for friend in user.friends:
                    if user.id < friend.id:
                        handle.write(f"FRIEND {user.name} {friend.name}\n")

    def load_dataset(self, path: str | os.PathLike[str]) -> None:
        """Read USER and FRIEND lines; users get generated names."""
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                if line.startswith(("\n", "#")):
                    continue
                user_match = _USER_LINE.match(line)
                if user_match:
                    user_id = int(user_match.group(1))
                    self.add_user(user_id, f"{USER_NAME_PREFIX}{user_id}")
                elif line.startswith("FRIEND "):
                    tokens = line.split()[1:3]
                    if len(tokens) < 2:
                        continue
                    first = _NAME_ID.match(tokens[0])
                    second = _NAME_ID.match(tokens[1])
                    if first and second:
                        self.add_friendship(int(first.group(1)), int(second.group(1)))