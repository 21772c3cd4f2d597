# tests/test_carve.py
# Walk-level checks with a scripted random source.
#
# 3x3 maze -> 5x5 working grid (B = block):
#    0  1  2  3  4
#    5  B  7  B  9
#   10 11 12 13 14
#   15  B 17  B 19
#   20 21 22 23 24

import pytest

from maze_test_utils import ScriptedRandom

from mazegen.grid import render
from mazegen.mapgen.carve import CarveStats, generate_path, generate_paths
from mazegen.mapgen.working import WorkingGrid
from mazegen.rng import PMRandom
from mazegen.tiles import BUILDING_PATH, EMPTY, GENERATED_PATH, PATH, WALL

# 2 -> 3 -> 4 -> 9 -> 14 -> 13 -> 12, then 7 touches 2 (own trunk): erase.
# Retry from 2 goes left to 1, which touches the root: commit.
LOOP_SCRIPT = [2, 0, 0, 0, 1, 0, 0, 1]
LOOP_ERASED = [12, 13, 14, 9, 4, 3]

def seeded_3x3():
    work = WorkingGrid.for_maze(3, 3)
    work.cells[0] = GENERATED_PATH
    return work

def test_first_start_is_first_isolated_room():
    assert seeded_3x3().next_start() == 2

def test_self_collision_erases_back_to_start():
    work = seeded_3x3()
    rng = ScriptedRandom(LOOP_SCRIPT)
    erased = []
    stats = CarveStats()
    generate_path(work, 2, rng, on_erase=erased.append, stats=stats)

    assert erased == [LOOP_ERASED]
    assert rng.bounds == [3, 1, 1, 1, 2, 1, 3, 3]
    assert (stats.erasures, stats.steps) == (1, 8)

    for i in LOOP_ERASED:
        assert work.cells[i] == EMPTY
    assert [work.cells[i] for i in (0, 1, 2)] == [GENERATED_PATH] * 3
    assert BUILDING_PATH not in work.cells

def test_erased_cells_do_not_render_as_path():
    work = seeded_3x3()
    generate_path(work, 2, ScriptedRandom(LOOP_SCRIPT))
    g = work.to_grid()
    # framed coordinates are working coordinates + 1
    for i in LOOP_ERASED:
        assert g.get(work.row_of(i) + 1, work.column_of(i) + 1) == WALL
    for i in (0, 1, 2):
        assert g.get(work.row_of(i) + 1, work.column_of(i) + 1) == PATH

def test_reaching_tree_commits_whole_trunk():
    work = seeded_3x3()
    # 2 -> 7 -> 12 -> 11 -> 10, then 5 touches the root.
    rng = ScriptedRandom([0, 0, 1, 0, 0])
    generate_path(work, 2, rng)
    carved = [i for i, s in enumerate(work.cells) if s == GENERATED_PATH]
    assert carved == [0, 2, 5, 7, 10, 11, 12]
    assert EMPTY in work.cells

def test_full_2x2_golden_with_scripted_draws():
    work = WorkingGrid.for_maze(2, 2)
    stats = generate_paths(work, ScriptedRandom([1, 0, 0]))
    assert stats.walks == 3
    assert stats.erasures == 0
    assert render(work.to_grid()) == (
        "# # # # #\n"
        "#       #\n"
        "#   #   #\n"
        "#   #   #\n"
        "# # # # #\n"
    )

def test_no_building_cells_left_after_driver():
    work = WorkingGrid.for_maze(6, 4)
    generate_paths(work, PMRandom(42))
    assert BUILDING_PATH not in work.cells
    for i in range(len(work)):
        if work.is_room(i):
            assert work.cells[i] == GENERATED_PATH

def test_empty_candidate_set_surfaces():
    work = WorkingGrid.for_maze(2, 2)
    work.cells[0] = GENERATED_PATH
    work.cells[2] = BUILDING_PATH
    work.cells[1] = BUILDING_PATH
    work.cells[5] = BUILDING_PATH
    with pytest.raises(ValueError):
        generate_path(work, 2, PMRandom(3))
