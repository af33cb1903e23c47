import numpy as np


def shape_mask(cells):
    """ 0/1 grid of the shape's bounding box """
    cells = list(cells)
    n = max([1] + [row + 1 for row, _ in cells])
    m = max([1] + [col + 1 for _, col in cells])
    mask = np.zeros(shape=(n, m), dtype=np.uint8)
    for row, col in cells:
        mask[row, col] = 1
    return mask


def num_regions(cells):
    c = shape_mask(cells)
    n, m = c.shape
    directions = [(-1, 0), (1, 0), (0, -1), (0, 1)]
    visited = set()
    region_cnt = 0
    for i in range(n):
        for j in range(m):
            if c[i, j] != 0 and (i, j) not in visited:
                region_cnt += 1
                queue = [(i, j)]
                visited.add((i, j))
                while len(queue) > 0:
                    u = queue.pop()
                    for d in directions:
                        v = (u[0] + d[0], u[1] + d[1])
                        if v[0] < 0 or v[0] >= n or v[1] < 0 or v[1] >= m:
                            continue
                        if c[v] != 0 and v not in visited:
                            visited.add(v)
                            queue.append(v)
    return region_cnt


def is_connected(cells):
    return num_regions(cells) == 1


def num_shared_edges(cells):
    """ Count of neighbouring mark pairs, 3 for every connected tetromino except the square """
    c = shape_mask(cells)
    return int((c[1:, :] & c[:-1, :]).sum() + (c[:, 1:] & c[:, :-1]).sum())
