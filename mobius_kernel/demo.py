from . import SL2C, ONE, ZERO, classify

DEMO = [
    SL2C(ONE, ZERO, complex(0, -2), ONE),
    SL2C(complex(1, -1), ONE, ONE, complex(1, 1)),
]

def run():
    for m in DEMO:
        result = classify(m)
        print(f"{m!r} -> {result.kind}")
        if getattr(result, "has_geometry", False):
            print(f"  fixed point: {result.fixed_point}")
            print(f"  translation: {result.translation}")
            print(f"  inner: {result.inner_circle!r}")
            print(f"  outer: {result.outer_circle!r}")
            print(f"  mirrored: {result.mutual_inversion_image!r}")
        print()


if __name__ == "__main__":
    run()
