# adventofcode

Solutions to a set of daily programming puzzles. Each day has its own module
in the `adventofcode` package. Each module takes the puzzle text as a string
and returns the answer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module                     | Puzzle                                                    |
|----------------------------|-----------------------------------------------------------|
| `adventofcode.day_one`     | dial rotations; counts how often the dial passes zero     |
| `adventofcode.day_two`     | id ranges; finds ids made of a repeated digit pattern     |
| `adventofcode.day_three`   | battery banks; picks digits in order for the largest number |
| `adventofcode.day_four`    | paper roll grid; removes rolls with fewer than four neighbours |
| `adventofcode.day_five`    | fresh ingredient ranges and available ids                 |
| `adventofcode.day_seven`   | beam splitters; draws beams and builds the split tree     |
| `adventofcode.day_eight`   | junction boxes joined into circuits by distance           |
| `adventofcode.day_nine`    | largest rectangles between red tiles                      |
| `adventofcode.day_eleven`  | paths through a device graph                              |
| `adventofcode.geometry`    | points, edges and rectangles used by day nine             |
| `adventofcode.utils`       | `read_input`, `render_tree` and the `timed` context manager |

## Usage

```python
from adventofcode.utils import read_input, timed
from adventofcode.day_one import parse_instructions, count_zero_passes
from adventofcode.day_two import parse_ranges, sum_wrong_ids
from adventofcode.day_three import total_joltage
from adventofcode.day_four import PaperGrid
from adventofcode.day_five import parse_inventory
from adventofcode.day_seven import BeamManifold
from adventofcode.day_eight import Playground
from adventofcode.day_nine import TileFloor
from adventofcode.day_eleven import DeviceGraph

instructions = parse_instructions("L68\nL30\nR48")
print(count_zero_passes(instructions, 50))

print(sum_wrong_ids(parse_ranges("11-22,95-115")))

print(total_joltage("987654321111111\n811111111111119", 12))

grid = PaperGrid("..@@.\n@@@.@\n@@@@@")
print(len(grid.accessible()), grid.remove_until_stable())

inventory = parse_inventory("3-5\n10-14\n\n1\n5\n11")
print(inventory.fresh_count(), inventory.covered_count())

manifold = BeamManifold(".S.\n...\n.^.\n...")
manifold.draw_beams()
print(manifold.render(), manifold.splits)
root = manifold.build_tree()
print(manifold.display_tree())
print(manifold.all_paths(root))

playground = Playground("0,0,0\n1,0,0\n5,5,5")
playground.connect_all()
print(playground.circuits_by_size(), playground.unassigned())

floor = TileFloor("7,1\n11,1\n11,7\n9,7\n9,5\n2,5\n2,3\n7,3")
with timed("tiles"):
    print(floor.largest_rectangle(), floor.largest_inside_rectangle())

graph = DeviceGraph("you: a b\na: out\nb: out", require_both=False)
print(graph.count_paths("you"))
```

`read_input(path)` returns the text of a puzzle file. `render_tree(node)`
draws any binary tree whose nodes have `left`, `right` and `label()` as
indented text. `timed(name)` prints how long the enclosed block took.

With `require_both=True`, `DeviceGraph.count_paths` counts only the paths
that pass through both `dac` and `fft`.

## What the package does not do

- There is no command-line program. The days are run by importing their
  modules and passing in the puzzle text, for example read with
  `read_input`.
- The sixth day's puzzle, a worksheet of column arithmetic, is not covered.