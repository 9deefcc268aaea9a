from cg2d.geom import as_points
from cg2d.hull import ConvexHull2D

if __name__ == "__main__":
    raw = [
        (0, 0), (0, 3), (4, 4), (1, 3), (0, 1),
        (3, 6), (-3, 6), (-4, 4), (1, 5), (-1, 5),
    ]
    pts = as_points(raw)
    hull = ConvexHull2D(pts)

    print("HULL:", [tuple(p) for p in hull.points()])
    print("AREA:", hull.area())
    report = hull.validate()
    print("VALIDATION:", report)

    with open("hull.off", "w", encoding="utf-8") as f:
        f.write(hull.to_off())
    print("Wrote hull.off, можна глянути в MeshLab/ParaView.")
