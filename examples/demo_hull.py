from quickhull3d.geom import unique_points
from quickhull3d.hull import QuickHull3D
from quickhull3d.logging_config import setup_logging

if __name__ == "__main__":
    setup_logging("DEBUG")
    raw = [
        (0,0,0), (1,0,0), (1,1,0), (0,1,0),
        (0,0,1), (1,0,1), (1,1,1), (0,1,1),
        (0.5,0.5,0.5), (0.2,0.8,0.3), (0.8,0.2,0.7)
    ]
    pts = unique_points(raw)
    hull = QuickHull3D(pts)

    print("FACES:", hull.faces())
    print("VALIDATION:", hull.validate())
    print("CHECK:", hull.check())

    hull.triangulate()
    hull.write_off("hull.off")
    print("Wrote hull.off — можна глянути в MeshLab/ParaView.")
