from hexlib import Axial, GridConfig, Offset

grid = GridConfig(grid_type="pointy_odd", inscribed_radius=10.0).build()
center = Offset(4, 3)


if __name__ == "__main__":
    print("center:", center, "->", grid.to_cubic(center), "at", grid.to_point2(center))
    print("corners:", [(round(x, 2), round(y, 2)) for x, y in grid.get_corner_points(center)])
    print("neighbors:", [str(n) for n in grid.get_neighbors(center)])
    print("ring 2:", [str(c) for c in grid.get_neighbors_ring(center, 2)])
    print("area of 3 rings:", len(list(grid.get_neighbors_around(center, 3))))
    print("distance to A-[9:-9]:", grid.cube_distance(grid.to_axial(center), Axial(9, -9)))
