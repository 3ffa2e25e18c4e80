import numpy as np
from seximal import Sf52, Sf144

# Create two random numpy arrays in the range [0,1)
A0 = np.random.rand(216)
A1 = np.random.rand(216)

# Accumulate the dot product in 32-bit and 64-bit seximal floats
acc32 = Sf52(0)
acc64 = Sf144(0)
for x, y in zip(A0, A1):
    acc32 += Sf52(x) * Sf52(y)
    acc64 += Sf144(x) * y

print("Using Sf52 arithmetic : ", acc32)
print("Using Sf144 arithmetic: ", acc64)
print("Reference (decimal)   : ", np.dot(A0, A1))
