"""Tests for the tighten_svg_viewbox command-line tool."""

# Standard Library
import argparse
import importlib.util
import pathlib

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_svgcrop_to_sys_path()


#============================================
def _load_tool_module():
	"""Load the viewBox tool module from the tools directory."""
	tool_path = pathlib.Path(conftest.repo_root()) / "tools" / "tighten_svg_viewbox.py"
	spec = importlib.util.spec_from_file_location("tighten_svg_viewbox", tool_path)
	if spec is None or spec.loader is None:
		raise RuntimeError(f"Could not load tool module from {tool_path}")
	module = importlib.util.module_from_spec(spec)
	spec.loader.exec_module(module)
	return module


tool = _load_tool_module()


#============================================
def _write_svg(path: pathlib.Path, body: str, viewbox: str = "0 0 1200 900") -> None:
	path.write_text(
		f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{viewbox}">{body}</svg>',
		encoding="utf-8",
	)


#============================================
def test_parse_rewrite():
	assert tool.parse_rewrite("14=10") == ("14", "10")


#============================================
@pytest.mark.parametrize("raw", ["14", "=10", "14="])
def test_parse_rewrite_invalid(raw):
	with pytest.raises(argparse.ArgumentTypeError):
		tool.parse_rewrite(raw)


#============================================
def test_parse_args_rejects_negative_margin():
	with pytest.raises(SystemExit):
		tool.parse_args(["-i", "a.svg", "-m", "-5"])


#============================================
def test_main_in_place(tmp_path, capsys):
	svg_path = tmp_path / "mol.svg"
	_write_svg(svg_path, '<line x1="10" y1="10" x2="90" y2="20"/>')
	tool.main(["-i", str(svg_path)])
	assert 'viewBox="-20 -20 140 70"' in svg_path.read_text(encoding="utf-8")
	output = capsys.readouterr().out
	assert "0 0 1200 900 -> -20 -20 140 70" in output
	assert "Tightened 1 of 1 file(s)" in output


#============================================
def test_main_output_dir_and_glob(tmp_path):
	source_dir = tmp_path / "src"
	source_dir.mkdir()
	out_dir = tmp_path / "out"
	_write_svg(source_dir / "a.svg", '<line x1="0" y1="0" x2="10" y2="10"/>')
	_write_svg(source_dir / "b.svg", "")
	tool.main(["-i", str(source_dir / "*.svg"), "-o", str(out_dir), "-m", "5"])
	assert 'viewBox="-5 -5 20 20"' in (out_dir / "a.svg").read_text(encoding="utf-8")
	# degenerate file is copied unchanged
	assert 'viewBox="0 0 1200 900"' in (out_dir / "b.svg").read_text(encoding="utf-8")
	# sources untouched
	assert 'viewBox="0 0 1200 900"' in (source_dir / "a.svg").read_text(encoding="utf-8")


#============================================
def test_main_font_size_rewrite(tmp_path):
	svg_path = tmp_path / "label.svg"
	_write_svg(svg_path, '<text x="50" y="50" font-size="14">H</text>')
	tool.main(["-i", str(svg_path), "-f", "14=10", "-f", "10=5", "-m", "30"])
	svg_text = svg_path.read_text(encoding="utf-8")
	assert 'font-size="5"' in svg_text
	assert 'viewBox="18.5 15 63 67.5"' in svg_text


#============================================
def test_main_strict_degenerate_exits(tmp_path):
	svg_path = tmp_path / "empty.svg"
	_write_svg(svg_path, "")
	with pytest.raises(SystemExit):
		tool.main(["-i", str(svg_path), "-s"])


#============================================
def test_main_malformed_exits(tmp_path):
	svg_path = tmp_path / "bad.svg"
	svg_path.write_text('<svg><line x1="0" y1="0" x2="1" y2="1"/></svg>', encoding="utf-8")
	with pytest.raises(SystemExit):
		tool.main(["-i", str(svg_path)])


#============================================
def test_main_no_matches_exits(tmp_path):
	with pytest.raises(SystemExit):
		tool.main(["-i", str(tmp_path / "missing*.svg")])


#============================================
def test_main_invalid_utf8_exits(tmp_path):
	svg_path = tmp_path / "binary.svg"
	svg_path.write_bytes(b'<svg viewBox="0 0 1 1"><text>\xff</text></svg>')
	with pytest.raises(SystemExit) as excinfo:
		tool.main(["-i", str(svg_path)])
	assert "binary.svg" in str(excinfo.value)


#============================================
def test_main_entity_declaration_exits(tmp_path):
	svg_path = tmp_path / "dtd.svg"
	svg_path.write_text(
		'<!DOCTYPE svg [<!ENTITY w "1">]>'
		'<svg viewBox="0 0 10 10"><line x1="0" y1="0" x2="1" y2="1"/></svg>',
		encoding="utf-8",
	)
	with pytest.raises(SystemExit) as excinfo:
		tool.main(["-i", str(svg_path)])
	assert "dtd.svg" in str(excinfo.value)


#============================================
def test_main_output_dir_name_collision_exits(tmp_path):
	first_dir = tmp_path / "first"
	second_dir = tmp_path / "second"
	first_dir.mkdir()
	second_dir.mkdir()
	_write_svg(first_dir / "mol.svg", '<line x1="0" y1="0" x2="10" y2="10"/>')
	_write_svg(second_dir / "mol.svg", '<line x1="5" y1="5" x2="6" y2="6"/>')
	out_dir = tmp_path / "out"
	with pytest.raises(SystemExit) as excinfo:
		tool.main(["-i", str(first_dir / "mol.svg"), "-i", str(second_dir / "mol.svg"), "-o", str(out_dir)])
	assert "collision" in str(excinfo.value)
	assert not (out_dir / "mol.svg").exists()


#============================================
def test_plan_output_paths_in_place():
	paths = [pathlib.Path("/a/mol.svg"), pathlib.Path("/b/mol.svg")]
	assert tool.plan_output_paths(paths, None) == paths
