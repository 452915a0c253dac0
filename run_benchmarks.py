# Based on Taneli Hukkinen's https://github.com/hukkin/tomli-w/blob/master/benchmark/run.py

from __future__ import annotations

import functools
import io
import timeit
from collections.abc import Callable

import pointshp

RECORD_COUNT = 100_000

POINTS = {
    "Point": [pointshp.Point(i, -i) for i in range(RECORD_COUNT)],
    "PointM": [pointshp.PointM(i, -i, i / 2) for i in range(RECORD_COUNT)],
    "PointZ": [pointshp.PointZ(i, -i, i * 2, i / 2) for i in range(RECORD_COUNT)],
}


def benchmark(
    name: str,
    run_count: int,
    func: Callable,
    col_widths: tuple,
) -> float:
    placeholder = "Running..."
    print(f"{name:>{col_widths[0]}} | {placeholder}", end="", flush=True)
    time_taken = timeit.timeit(func, number=run_count)
    print("\b" * len(placeholder), end="")
    time_suffix = " s"
    print(f"{time_taken:{col_widths[1] - len(time_suffix)}.3g}{time_suffix}", end="")
    print()
    return time_taken


def write_points(points: list[pointshp.PointShape]) -> bytes:
    b_io = io.BytesIO()
    for point in points:
        pointshp.write_shape(point, b_io)
    return b_io.getvalue()


def read_points(shapeType: int, data: bytes) -> None:
    b_io = io.BytesIO(data)
    ShapeClass = pointshp.SHAPE_CLASS_FROM_SHAPETYPE[shapeType]
    for _ in range(len(data) // ShapeClass.size):
        ShapeClass.from_byte_stream(b_io)


ENCODED = {test_name: write_points(points) for test_name, points in POINTS.items()}

writer_benchmarks = [
    functools.partial(
        benchmark,
        name=f"Write {test_name}",
        func=functools.partial(write_points, points=points),
    )
    for test_name, points in POINTS.items()
]

reader_benchmarks = [
    functools.partial(
        benchmark,
        name=f"Read {test_name}",
        func=functools.partial(
            read_points,
            shapeType=POINTS[test_name][0].shapeType,
            data=data,
        ),
    )
    for test_name, data in ENCODED.items()
]


def run(run_count: int, benchmarks: list[Callable[[], None]]) -> None:
    col_widths = (22, 10)
    col_head = ("codec", "exec time", "performance (more is better)")
    print(f"Running benchmarks {run_count} times:")
    print("-" * col_widths[0] + "---" + "-" * col_widths[1])
    print(f"{col_head[0]:>{col_widths[0]}} | {col_head[1]:>{col_widths[1]}}")
    print("-" * col_widths[0] + "-+-" + "-" * col_widths[1])
    for benchmark in benchmarks:
        benchmark(  # type: ignore [call-arg]
            run_count=run_count,
            col_widths=col_widths,
        )


if __name__ == "__main__":
    print("Writer tests:")
    run(1, writer_benchmarks)  # type: ignore [arg-type]
    print("\n\nReader tests:")
    run(1, reader_benchmarks)  # type: ignore [arg-type]
