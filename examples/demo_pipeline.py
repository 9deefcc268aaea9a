# examples/demo_pipeline.py
import numpy as np

from cg2d.pipeline import hull_from_array, hull_from_lines

if __name__ == "__main__":
    rng = np.random.default_rng(0)
    cloud = rng.random((200, 2))

    hull = hull_from_array(cloud)
    print("Points:", len(cloud))
    print("Hull vertices:", len(hull))

    text = ["(0, 0)", "(2, 0)", "1, 1", "(2.0, 2.0)", "( 0 , 2 )"]
    for p in hull_from_lines(text):
        print(tuple(p))
