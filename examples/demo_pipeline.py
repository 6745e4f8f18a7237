# examples/demo_pipeline.py
import numpy as np

from quickhull3d.pipeline import convex_hull, hull_area, hull_volume, reference_hull

if __name__ == "__main__":
    rng = np.random.default_rng(7)
    cloud = rng.normal(size=(500, 3))

    vertices, faces = convex_hull(cloud)
    print("Vertices:", len(vertices))
    print("Faces:", len(faces))
    print("Area:", hull_area(vertices, faces))
    print("Volume:", hull_volume(vertices, faces))
    print("scipy vertices:", len(reference_hull(cloud)))  # потрібен scipy
