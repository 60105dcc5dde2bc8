# sollong

The core of a small top-down puzzle game: the player collects every coin on
a tile map and then walks to the exit. The package checks map files,
decodes XPM sprites and works out what to draw where.

## Modules

### `sollong.mapcheck` — maps

`load_map(path, bonus=False)` reads a `.ber` file and returns a `GameMap`
(`grid`, `coins`, `player` as `(row, column)`, plus `width` and `height`).
`parse_map(text, rules)` does the same for text already in memory. Any
problem raises `MapError`.

A map is accepted when:

- the file name ends in `.ber` (and is longer than that);
- its size is within the rules: the width is taken from the first line
  without its line end, the height is the number of lines. The standard
  rules (`STANDARD`) allow up to 40×24 tiles, the bonus rules (`BONUS`) up
  to 160×128; maps of two lines or fewer, or 3×3 and smaller, are refused.
  Rows are then read at that width, one line-end character skipped after
  each;
- the border is made of walls (`is_closed`);
- only allowed tiles appear: `0` floor, `1` wall, `C` coin, `E` exit,
  `P` player, and under the bonus rules `X` enemy; there is at least one
  coin, exactly one player and exactly one exit (`scan_tiles`);
- every coin and the exit can be reached from the player, with walls and
  enemies blocking the way (`flood_fill`, `all_reachable`).

The single steps — `check_filename`, `measure`, `to_grid` and those above —
can be called on their own. `Rules(max_width, max_height, tiles)` describes
a set of limits.

### `sollong.xpm` — sprites

`load_xpm(path)` and `read_xpm(text)` decode XPM images into `XpmImage`
objects (`width`, `height`, `pixels`, and `pixel(x, y)` giving a 0xRRGGBB
value). The colour `None` becomes `0xFF000000`. `parse_xpm(lines)` works on
the quoted data strings directly; `strip_comments` and `quoted_lines` are
the steps before it. Bad data raises `XpmError`.

### `sollong.colors` — colours

`lookup_color(name, suffix=None)` resolves `#rrggbb` or an X11 colour name
(case-insensitive; `none` is -1, unknown names are 0).
`channel_shifts(red_mask, green_mask, blue_mask)` and
`convert_color(color, depth, shifts)` turn a 0xRRGGBB value into a pixel
value for a TrueColor visual; depths of 24 and more leave it unchanged.

### `sollong.wordtab` — text helpers

`find`, `find_unquoted` (skips text inside double quotes) and
`split_words` (splits on spaces and tabs) are used by the XPM reader.

### `sollong.render` — scene layout

- `layout(game_map)` returns `DrawCommand`s for the standard game at
  32-pixel tiles: one sprite per tile, then the player facing right.
- `bonus_layout(game_map, facing=Facing.DOWN, moves=0)` draws walls and
  floors, then coins and the exit, then enemies, then the player in the
  given `Facing`, and finally the text `MOVES ` and the move count.
- `tile_size_for(width, height)` picks 256, 128, 64, 32, 16 or 8 pixels by
  map size; `window_size(game_map, tile_size)` gives the window in pixels;
  `moves_label(moves)` formats the counter.
- The exit is drawn closed while `coins` is non-zero and open otherwise.

`Sprite` names the images; a `DrawCommand` holds `x`, `y` and either a
`sprite` or a `text` with its `color`.

## Example

```python
from sollong.mapcheck import load_map, MapError
from sollong.render import layout, window_size

try:
    game_map = load_map("maps/level1.ber")
except MapError as err:
    print(f"Error: {err}")
else:
    print(window_size(game_map, 32))
    for command in layout(game_map):
        print(command)
```

```python
from sollong.xpm import load_xpm

sprite = load_xpm("textures/wall32.xpm")
print(sprite.width, sprite.height, hex(sprite.pixel(0, 0)))
```

## What it does not do

There is no window, no drawing, no keyboard handling and no game loop:
moving the player, counting moves, collecting coins and ending the game
are left to the front end that uses these modules. No command-line
program is installed, and no sprite files are included.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```