"""
The hand-drawn tetra catalog. Order matters: the placement tool indexes
shapes by position.
"""

# Shapes are separated by blank lines. A line holding only spaces is blank too
# (see the separator before the last shape).
RAW_CATALOG = """
xx
xx

xxxx

x
x
x
x


xxx
 x

x
xx
x

 x
xxx

 x
xx
 x


xxx
x

x
x
xx

  x
xxx

xx
 x
 x

xxx
  x

 x
 x
xx

x
xxx

xx
x
x


 xx
xx

x
xx
 x


xx
 xx
 
 x
xx
x
"""

# Number of shapes in RAW_CATALOG
TETRAS_COUNT = 19
