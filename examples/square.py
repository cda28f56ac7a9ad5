from geom2d import Point, closest_pair, convex_hull, is_inside, polygon_area, polygon_diameter

square = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]

print("area     ", polygon_area(square))        # 16
print("diameter ", polygon_diameter(square))    # 4*sqrt(2) ~ 5.657
print("(2,2) in ", is_inside(square, (2, 2)))   # True
print("(5,5) in ", is_inside(square, (5, 5)))   # False
print("closest  ", closest_pair([(0, 0), (3, 0), (0, 4)]))  # 3

line = [(0, 0), (1, 1), (2, 2), (3, 3)]
print("hull     ", [str(p) for p in convex_hull(line)])  # (0, 0), (3, 3)
print("width    ", polygon_diameter(line))      # 3*sqrt(2)
