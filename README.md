# sosyalag

A small toolkit for analysing a social network. Users are indexed by id in a
red-black tree, and friendships between them are mutual. The package has no
dependencies beyond the Python standard library. Python 3.10 or later is
required.

## Modules

- `sosyalag.rbtree`: `RedBlackTree`, `RBNode` and `Color`. This is an integer-keyed
  red-black tree. Equal keys go into the right subtree. It supports
  `insert`, `find`, `get` (which raises `KeyError`), `in`, `len()`,
  in-order iteration, `preorder()` and `right_spine()`.
- `sosyalag.network`: `SocialNetwork`, `User`, `Community` and the errors
  `NetworkError`, `UserNotFoundError` and `CapacityError`.
- `sosyalag.visualize`: Graphviz sources and their rendering to PNG.
- `sosyalag.cli`: the `sosyalag` command, along with `generate_sample` and
  `format_ranking`.

## Installation

```
pip install .
```

Rendering images needs the Graphviz `dot` program on your `PATH`. The `.dot`
files are written even when it is not installed. In that case `render`
returns `False`.

## Command line

```
sosyalag [--seed N] [--output-dir DIR]
```

The command does the following:

- builds a random sample network of 20 users named `Kullanici1` to `Kullanici20`
- saves the network as `veriseti.txt`
- prints, in Turkish:
  - the friends of user 1 at distance 2
  - the common friends of users 1 and 4
  - the communities and their statistics
  - the influence scores of users 1 to 5
  - a ranking of the most influential users
- writes `ag`, `agac`, `topluluklar` and `etki` as `.dot` files and renders
  them to `.png`

All output files go to `--output-dir`, which defaults to the current
directory. `--seed` makes the random network reproducible.

## Library use

```python
from sosyalag.network import SocialNetwork
from sosyalag import visualize

net = SocialNetwork(100)
for uid in range(1, 6):
    net.add_user(uid, f"Kullanici{uid}")
net.add_friendship(1, 2)
net.add_friendship(2, 3)
net.add_friendship(1, 4)
net.add_friendship(4, 3)

print([u.name for u in net.friends_at_distance(1, 2)])
print([u.name for u in net.common_friends(1, 3)])
for community in net.communities():
    print(community.number, [u.name for u in community.members], community.density)
print(net.influence_score(1))
print(net.most_influential(3))

net.save_dataset("veriseti.txt")
visualize.write_all(net, ".")
```

### Network behaviour

- **Capacity.** `SocialNetwork(max_users)` defaults to 100 users.
  - Adding a user past that limit raises `CapacityError`.
  - Adding a friendship when either user already has 50 friends also raises `CapacityError`.
  - Names are truncated to 49 characters.
- **Unknown ids.** Looking up an unknown id raises `UserNotFoundError`, which is also a `LookupError`. Both error classes derive from `NetworkError`.
- **`friends_at_distance(user_id, distance)`** returns the users first reached at exactly that depth by a depth-first walk.
- **`common_friends(a, b)`** returns the friends of `a` who are also friends of `b`, in `a`'s friend order.
- **`influence_score(user_id)`** is a weighted sum of four parts:
  - direct friends, relative to the most-connected user
  - second-degree reach
  - links inside the user's circle
  - the friend counts of the user's friends

  For a user with no friends it is NaN.
- **`ranked_by_influence()`** returns every user with their score, highest score first.
- **`most_influential(count)`** returns `(rank, user, score)` tuples.
  - `count` must be positive, otherwise `ValueError` is raised.
  - With more than five users, only the top three and the bottom two are returned.
  - Otherwise every user is returned.
- **Right-spine traversal.** `communities()`, `save_dataset()`, the maximum used by `influence_score()`, and the `visualize` views walk the users on the tree's right spine (`spine_users()`: the root and its successive right children). They do not visit every user. `users_in_order()` yields every user in ascending id order.

### Dataset files

- `save_dataset(path)` writes `USER <id> <name>` lines, followed by `FRIEND <name> <name>` lines with each friendship written once.
- `load_dataset(path)` reads such a file back:
  - Blank lines and lines starting with `#` are skipped.
  - Users are given the name `Kullanici<id>`.
  - A friendship is read only when both names have the form `Kullanici<id>`.

### Visualisation

| Function | Output |
| --- | --- |
| `network_dot` | the friendship graph, sized and coloured by influence |
| `tree_dot` | the red-black tree, with nodes in their red/black colours |
| `communities_dot` | users coloured by friend-count bucket |
| `influence_dot` | a bar-style chart of influence scores |

Each function returns Graphviz source as a string.

- `render(dot_source, dot_path, png_path)` writes the source and runs `dot -Tpng`.
- `write_all(network, directory)` does this for all four views. It returns `(dot path, png path, rendered)` for each view.

## What it does not do

- Users and friendships cannot be removed once added.
- A friendship added twice is recorded twice.
- There is no persistent storage other than the plain-text dataset file.
- Images are produced only through an external Graphviz installation.