# Output symbols and working-grid cell states.

WALL = "#"
PATH = " "

# Working-grid states (doubled resolution, see mapgen/working.py)
EMPTY = 0
BLOCK = 1            # both coordinates odd; never carved
BUILDING_PATH = 2    # on the current walk's stack
GENERATED_PATH = 3   # committed to the tree

def symbol_for_state(state: int) -> str:
    # Only committed cells are open; stray EMPTY and BLOCK both render as wall.
    return PATH if state == GENERATED_PATH else WALL
