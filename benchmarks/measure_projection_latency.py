"""Benchmark helper for color projection and segment building latency."""
from __future__ import annotations

import argparse
import random
import statistics
from dataclasses import dataclass
from time import perf_counter
from typing import Iterable, Sequence

from tincture.services.settings import Settings, SettingsStore

_PALETTE = ("#e03131", "#2f9e44", "#1971c2", "#f08c00", "#6741d9")


@dataclass(slots=True)
class BenchmarkResult:
    label: str
    chars: int
    ranges: int
    paint_ms: float
    edit_ms: float
    project_ms: float
    segment_ms: float


def _make_text(words: int, rng: random.Random) -> str:
    vocabulary = ("lorem", "ipsum", "dolor", "sit", "amet", "consectetur", "adipiscing", "elit")
    return " ".join(rng.choice(vocabulary) for _ in range(words))


def _wrap(text: str, width: int = 40) -> str:
    out: list[str] = []
    column = 0
    for char in text:
        if char == " " and column >= width:
            out.append("\n")
            column = 0
            continue
        out.append(char)
        column += 1
    return "".join(out)


def _median_ms(samples: Sequence[float]) -> float:
    return statistics.median(samples) * 1000.0


def run_case(label: str, *, settings: Settings, words: int, paints: int, edits: int, repeat: int, seed: int) -> BenchmarkResult:
    rng = random.Random(seed)
    text = _make_text(words, rng)
    base = settings.create_element(text, wrap=_wrap)

    paint_samples: list[float] = []
    element = base
    for _ in range(repeat):
        element = base
        start = perf_counter()
        for _ in range(paints):
            a = rng.randrange(len(text))
            b = min(len(text), a + rng.randrange(1, 60))
            element = element.paint(a, b, rng.choice(_PALETTE + (element.stroke_color,)))
        paint_samples.append(perf_counter() - start)

    edit_samples: list[float] = []
    edited = element
    for _ in range(repeat):
        edited = element
        start = perf_counter()
        for _ in range(edits):
            position = rng.randrange(len(edited.original_text) + 1)
            deleted = rng.randrange(0, 4)
            edited = edited.apply_edit(position, "x" * rng.randrange(0, 4), deleted, wrap=_wrap)
        edit_samples.append(perf_counter() - start)

    project_samples: list[float] = []
    segment_samples: list[float] = []
    for _ in range(repeat):
        start = perf_counter()
        settings.per_char_colors(edited)
        project_samples.append(perf_counter() - start)
        start = perf_counter()
        settings.line_segments(edited)
        segment_samples.append(perf_counter() - start)

    return BenchmarkResult(
        label=label,
        chars=len(edited.original_text),
        ranges=len(edited.color_ranges or ()),
        paint_ms=_median_ms(paint_samples),
        edit_ms=_median_ms(edit_samples),
        project_ms=_median_ms(project_samples),
        segment_ms=_median_ms(segment_samples),
    )


def _default_cases() -> Iterable[tuple[str, int]]:
    return (("paragraph", 200), ("page", 2_000), ("chapter", 20_000))


def main() -> None:
    parser = argparse.ArgumentParser(description="Measure color range projection latency on generated text.")
    parser.add_argument("--paints", type=int, default=200, help="Paint operations applied per case.")
    parser.add_argument("--edits", type=int, default=200, help="Text edits applied per case.")
    parser.add_argument("--repeat", type=int, default=5, help="Samples per measurement; the median is reported.")
    parser.add_argument("--theme", choices=("light", "dark"), default=None, help="Override the configured theme.")
    parser.add_argument("--seed", type=int, default=7)
    args = parser.parse_args()

    settings = SettingsStore().load(overrides={"theme": args.theme})
    print(f"theme={settings.theme} paints={args.paints} edits={args.edits} repeat={args.repeat}")
    print(f"{'case':<10} {'chars':>8} {'ranges':>7} {'paint':>9} {'edit':>9} {'project':>9} {'segment':>9}")
    for label, words in _default_cases():
        result = run_case(
            label,
            settings=settings,
            words=words,
            paints=args.paints,
            edits=args.edits,
            repeat=args.repeat,
            seed=args.seed,
        )
        print(
            f"{result.label:<10} {result.chars:>8} {result.ranges:>7} "
            f"{result.paint_ms:>8.2f}ms {result.edit_ms:>8.2f}ms "
            f"{result.project_ms:>8.2f}ms {result.segment_ms:>8.2f}ms"
        )


if __name__ == "__main__":
    main()
