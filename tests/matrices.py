# [[0,1,2],[1,0,3],[2,3,0]] with one unit added to every entry
SMALL = [[1.0, 2.0, 3.0],
         [2.0, 1.0, 4.0],
         [3.0, 4.0, 1.0]]
