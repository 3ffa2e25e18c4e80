import numpy as np
from seximal import INTEGER_TYPES, Sf52, Sf144

# The range of every integer type, in seximal.
for cls in INTEGER_TYPES:
    print(f"{cls.__name__:>7} ({cls.native.name:>7}): {cls(cls.MIN)} .. {cls(cls.MAX)}")

# Machine epsilon and largest value of each float type.
for cls in (Sf52, Sf144):
    info = np.finfo(cls.native.dtype)
    print(f"{cls.__name__:>7} ({cls.native.name:>7}): eps {cls(info.eps)}, max {cls(info.max)}")
