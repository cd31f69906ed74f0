# boardkit

Building blocks for circuit board viewers. The package has no dependencies
beyond the standard library.

## Modules

### `boardkit.board`

This module holds the board data model.

- `Point` is a board position. Its coordinates are always stored as floats.
- `BoardElement` is the abstract base of `Net`, `Pin` and `Component`. Each element has a `board_side` and a `unique_id()`:
  - a net's id is `"n_"` followed by its name;
  - a pin's id is `"p_"` followed by its number;
  - a component's id is `"c_"` followed by its name.
- `Component.mount_type_label()` returns `"SMD"`, `"DIP"` or `"UNKNOWN"`.
- `Component.is_dummy()` is true for `ComponentType.DUMMY`.
- The enums are `BoardSide`, `PinType`, `MountType`, `ComponentType` and `BoardType`.
- `Board` is an abstract base class. A concrete board implements `nets()`, `components()`, `pins()` and `outline_points()`. `board_type()` returns `BoardType.UNKNOWN` unless a subclass changes it.
- `is_prefix(prefix, base)` tests whether one string starts another.
- `remove_element(element, items)` removes an item from a list by swapping it with the last item. It does not keep the order, and it returns whether anything was removed.

### `boardkit.geometry`

This module holds the geometry used to build part outlines.

- `Vec2` is an immutable 2D vector. It can be unpacked as `x, y`.
- `rotate_vector(v, theta)` rotates about the origin, and `rotate_about(v, origin, theta)` rotates about a given point. Both take angles in radians.
- `angle_to_x(a, b)` gives the angle of the segment a→b to the X axis.
- `orientation(p, q, r)` returns an `Orientation`: `COLLINEAR`, `CLOCKWISE` or `COUNTERCLOCKWISE`. The cross product is truncated to an integer before its sign is taken.
- `convex_hull(points)` is a gift-wrapping hull. It returns an empty list for fewer than three points.
- `tighten_hull(hull, threshold)` drops points where the neighbouring segments differ in angle by less than `threshold`.
- `minimum_bounding_box(hull, pin_size)` returns the four corners of the smallest-area rotated rectangle around the hull, grown by `pin_size` on each side. An empty hull raises `ValueError`.
- `segment_intersection(p0, p1, p2, p3)` returns the point where two segments meet. It returns `None` if they do not meet or are parallel.

### `boardkit.utils`

This module has file and string helpers.

- `file_as_buffer(filename)` reads a whole file as `bytes`. If the path is not a regular file, it raises `OSError`.
- `check_fileext(filename, fileext)` compares the lower-cased extension, dot included, with `fileext`. Pass `fileext` in lower case.
- `find_str_in_buf(needle, buf)` searches bytes for a `str` or `bytes` needle.
- `compare_string_insensitive(first, second)` compares two strings without regard to case.
- `lookup_file_insensitive(path, filename)` finds a directory entry without regard to case. It returns `path + entry`, or `""` if nothing matches.
- `split_string(text)` splits on whitespace.
- `path_is_directory(path)` and `path_is_regular(path)` test what a path names.

### `boardkit.userdirs`

This module finds and creates per-user directories.

- `get_user_dir(UserDir.CONFIG)` and `get_user_dir(UserDir.DATA)` return an `OpenBoardView` directory with a trailing separator. They create the directory if it is missing.
  - On POSIX systems the base is `$XDG_CONFIG_HOME` or `$XDG_DATA_HOME`. If that is unset, the base is `$HOME/.config` or `$HOME/.local/share`.
  - On Windows the base is `%APPDATA%` or `%LOCALAPPDATA%`.
  - If no directory can be used, the result is the current directory (`./` or `.\`).
- `get_env_var(name)` returns the value of an environment variable, or `""` if it is unset.
- `create_dir(path)` creates one directory. `create_dirs(path)` creates every slash-terminated prefix of a path.
- `find_insensitive(text, pattern)` is a case-insensitive substring search. It returns the index of the match, or `-1`. An empty pattern matches at 0.

## What it does not do

- **No board file reader.** `Board` is abstract, and nothing here reads a board file into one.
- **No viewer.** There is no drawing code and no window.
- **No file-open dialog and no font loading.**
- **No command-line program.**

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from boardkit.geometry import Vec2, convex_hull, minimum_bounding_box

pins = [Vec2(0, 0), Vec2(4, 0), Vec2(4, 2), Vec2(0, 2), Vec2(2, 1)]
hull = convex_hull(pins)
box = minimum_bounding_box(hull, 0.5)  # four corners, padded by the pin size
```

```python
from boardkit.userdirs import UserDir, get_user_dir

config_dir = get_user_dir(UserDir.CONFIG)
```