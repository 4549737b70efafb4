#!/usr/bin/env python3
"""Tighten the viewBox of rendered molecule SVG files around their geometry.

Optionally rewrites font-size and stroke-width values first, so that the
label extents are measured with the final font sizes.
"""

# Standard Library
import argparse
import glob
import os
import pathlib
import sys

# Ensure packages/svgcrop is importable when run from a source checkout.
_REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_SVGCROP_DIR = os.path.join(_REPO_ROOT, "packages", "svgcrop")
if _SVGCROP_DIR not in sys.path:
	sys.path.insert(0, _SVGCROP_DIR)

from svgcrop.constants import VIEWBOX_MARGIN
from svgcrop.crop import compute_viewbox
from svgcrop.errors import DegenerateGeometry
from svgcrop.errors import MalformedDocument
from svgcrop.restyle import StyleRewrite
from svgcrop.restyle import apply_style_rewrites
from svgcrop.viewport import find_viewbox
from svgcrop.viewport import format_viewbox
from svgcrop.viewport import replace_viewbox


#============================================
def parse_rewrite(raw_value: str) -> tuple[str, str]:
	"""Parse one OLD=NEW rewrite argument."""
	if "=" not in raw_value:
		raise argparse.ArgumentTypeError(f"expected OLD=NEW, got {raw_value!r}")
	old, new = raw_value.split("=", 1)
	old = old.strip()
	new = new.strip()
	if not old or not new:
		raise argparse.ArgumentTypeError(f"expected OLD=NEW, got {raw_value!r}")
	return (old, new)


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""Parse command-line arguments."""
	parser = argparse.ArgumentParser(
		description="Fit the viewBox of SVG files to their lines and text labels.",
	)
	parser.add_argument(
		"-i", "--input",
		dest="inputs",
		action="append",
		required=True,
		help="SVG file or glob pattern (repeatable).",
	)
	parser.add_argument(
		"-o", "--output-dir",
		dest="output_dir",
		type=str,
		default=None,
		help="Directory for rewritten files (default: rewrite in place).",
	)
	parser.add_argument(
		"-m", "--margin",
		dest="margin",
		type=float,
		default=VIEWBOX_MARGIN,
		help=f"Padding around the geometry (default: {VIEWBOX_MARGIN:g}).",
	)
	parser.add_argument(
		"-s", "--strict",
		dest="strict",
		action="store_true",
		help="Fail on files without any line or text geometry.",
	)
	parser.add_argument(
		"-f", "--font-size",
		dest="font_sizes",
		action="append",
		type=parse_rewrite,
		default=[],
		help="Rewrite font-size OLD=NEW before cropping (repeatable, applied in order).",
	)
	parser.add_argument(
		"-w", "--stroke-width",
		dest="stroke_widths",
		action="append",
		type=parse_rewrite,
		default=[],
		help="Rewrite stroke-width OLD=NEW before cropping (repeatable, applied in order).",
	)
	args = parser.parse_args(argv)
	if args.margin < 0:
		parser.error("--margin must not be negative")
	return args


#============================================
def resolve_input_paths(patterns: list[str]) -> list[pathlib.Path]:
	"""Resolve sorted unique SVG paths from file names or glob patterns."""
	paths = set()
	for pattern in patterns:
		matches = glob.glob(pattern, recursive=True)
		if not matches and os.path.isfile(pattern):
			matches = [pattern]
		for raw in matches:
			path = pathlib.Path(raw).resolve()
			if path.is_file():
				paths.add(path)
	return sorted(paths)


#============================================
def plan_output_paths(input_paths: list[pathlib.Path], output_dir: str | None) -> list[pathlib.Path]:
	"""Return one output path per input, refusing name collisions in output_dir."""
	if output_dir is None:
		return list(input_paths)
	output_root = pathlib.Path(output_dir).resolve()
	output_paths = []
	sources: dict[str, pathlib.Path] = {}
	for input_path in input_paths:
		if input_path.name in sources:
			raise SystemExit(
				f"Output name collision in {output_root}: "
				f"{sources[input_path.name]} and {input_path}"
			)
		sources[input_path.name] = input_path
		output_paths.append(output_root / input_path.name)
	return output_paths


#============================================
def build_rewrites(args: argparse.Namespace) -> list[StyleRewrite]:
	"""Return the ordered style rewrites requested on the command line."""
	rewrites = []
	for old, new in args.font_sizes:
		rewrites.append(StyleRewrite("font-size", old, new))
	for old, new in args.stroke_widths:
		rewrites.append(StyleRewrite("stroke-width", old, new))
	return rewrites


#============================================
def process_file(
		input_path: pathlib.Path,
		output_path: pathlib.Path,
		rewrites: list[StyleRewrite],
		margin: float,
		strict: bool) -> bool:
	"""Rewrite and crop one SVG file, return True when the viewBox changed."""
	svg_text = input_path.read_text(encoding="utf-8")
	svg_text = apply_style_rewrites(svg_text, rewrites)
	old_box = find_viewbox(svg_text)
	changed = True
	try:
		new_box = compute_viewbox(svg_text, margin)
		svg_text = replace_viewbox(svg_text, new_box)
		print(f"{input_path.name}: {format_viewbox(old_box)} -> {format_viewbox(new_box)}")
	except DegenerateGeometry:
		if strict:
			raise
		changed = False
		print(f"{input_path.name}: no geometry found, viewBox kept")
	output_path.parent.mkdir(parents=True, exist_ok=True)
	output_path.write_text(svg_text, encoding="utf-8")
	return changed


#============================================
def main(argv: list[str] | None = None) -> None:
	"""Tighten the viewBox of every requested SVG file."""
	args = parse_args(argv)
	input_paths = resolve_input_paths(args.inputs)
	if not input_paths:
		raise SystemExit("No SVG files matched the given inputs")
	rewrites = build_rewrites(args)
	output_paths = plan_output_paths(input_paths, args.output_dir)
	changed_count = 0
	for input_path, output_path in zip(input_paths, output_paths):
		try:
			if process_file(input_path, output_path, rewrites, args.margin, args.strict):
				changed_count += 1
		except (MalformedDocument, DegenerateGeometry, UnicodeDecodeError) as error:
			raise SystemExit(f"{input_path}: {error}") from error
	print()
	print(f"Tightened {changed_count} of {len(input_paths)} file(s)")


if __name__ == "__main__":
	main()
