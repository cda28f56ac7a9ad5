"""
Hull, area and diameter of a random point cloud.
"""
import numpy as np
from geom2d import closest_pair, convex_hull, polygon_area, polygon_diameter

rng = np.random.default_rng(0)
cloud = rng.standard_normal((1000, 2))

hull = convex_hull(cloud)
print(f"hull vertices: {len(hull)}")
print(f"hull area:     {float(polygon_area(hull)):.4f}")
print(f"diameter:      {float(polygon_diameter(hull)):.4f}")
print(f"closest pair:  {float(closest_pair(cloud)):.6f}")
