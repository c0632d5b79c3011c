import functools


def init_neighbors(w: int, h: int):
    """Adjacency lists for a row-major w x h board.

    Neighbors are listed upper-left, up, upper-right, left, right, lower-left,
    down, lower-right, which is ascending order for row-major indices.
    """

    def idx(x: int, y: int):
        return w * y + x

    def pos(idx: int):
        return (idx % w, idx // w)

    ns: list[list[int]] = []
    for i in range(0, w * h):
        x, y = pos(i)
        n = []
        for dy in range(-1, 2):
            ny = y + dy
            if ny < 0 or ny >= h:
                continue
            for dx in range(-1, 2):
                nx = x + dx
                if nx < 0 or nx >= w:
                    continue
                if dx == 0 and dy == 0:
                    continue
                n.append(idx(nx, ny))
        ns.append(n)
    return ns


@functools.cache
def get_neighbors(w: int, h: int) -> tuple[tuple[int, ...], ...]:
    # Shared by every solver with these dimensions, so it's frozen.
    return tuple(tuple(n) for n in init_neighbors(w, h))
