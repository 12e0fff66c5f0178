"""
Differentiate z = (x + y) * y at x = 2, y = 3.

Expected: z = 15, dz/dx = y = 3, dz/dy = (x + y) + y = 8.
"""

from scalar_aad import add, backward, leaf, mul, print_computation_graph


def main():
    x = leaf(2.0, name="x")
    y = leaf(3.0, name="y")

    q = add(x, y)
    z = mul(q, y)

    print(f"x.value = {x.value}")
    print(f"y.value = {y.value}")
    print(f"z.value = (x + y) * y = {z.value}")

    backward(z)

    print(f"dz/dx (x.gradient) = {x.gradient}")
    print(f"dz/dy (y.gradient) = {y.gradient}")

    print_computation_graph(z)


if __name__ == "__main__":
    main()
