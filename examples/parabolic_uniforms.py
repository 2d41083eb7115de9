"""Example: classify a parabolic matrix and print its shader uniforms."""

from mobius_kernel import SL2C, classify

M = SL2C(1 - 1j, 1, 1, 1 + 1j)


def main() -> None:
    result = classify(M)
    print(f"{M!r} is {result.kind}")
    print(f"fixed point: {result.fixed_point}, translation: {result.translation}")
    for label, shape in (
        ("inner", result.inner_circle),
        ("outer", result.outer_circle),
        ("mirrored", result.mutual_inversion_image),
    ):
        print(f"{label}: {shape!r}")
    print("uniforms:", ", ".join(f"{v:.6g}" for v in result.uniform_array()))


if __name__ == "__main__":
    main()
