# constants.py
EPSILON3D = 1e-8

# tolerances used by the tolerant __eq__ of the value types
REL_TOL = 1e-9
ABS_TOL = 1e-12
