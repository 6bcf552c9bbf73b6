"""Tests for palette_recolour.pipeline and the CLI front end."""

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from palette_recolour.cli import main
from palette_recolour.constants import DEFAULT_SCHEMES_PATH, SCHEMES_ENV_VAR
from palette_recolour import cli
from palette_recolour.errors import ConfigError, InvalidSelectionError, UnknownSchemeError
from palette_recolour.image_io import load_image_rgba
from palette_recolour.palette_store import parse_catalog
from palette_recolour.pipeline import (
    RunConfig,
    output_path,
    resolve_schemes_path,
    run_pipeline,
)

SCHEMES = 'mono:\n  - "#000000"\n  - "#ffffff"\nred:\n  - "#ff0000"\n'


@pytest.fixture
def scheme_file(tmp_path: Path) -> Path:
    f = tmp_path / 'schemes.yaml'
    f.write_text(SCHEMES)
    return f


@pytest.fixture
def image_file(tmp_path: Path) -> Path:
    arr = np.zeros((4, 4, 4), dtype=np.uint8)
    arr[..., :3] = 10
    arr[:2, :, :3] = 200
    arr[..., 3] = 77
    p = tmp_path / 'photo.png'
    Image.fromarray(arr).save(p)
    return p


class TestOutputPath:
    def test_default_next_to_input(self):
        assert output_path(Path('/x/photo.png'), 'nord') == Path('/x/photo_nord.png')

    def test_suffix_and_extension(self):
        got = output_path(Path('/x/photo.jpeg'), 'nord', '_denoised')
        assert got == Path('/x/photo_nord_denoised.jpeg')

    def test_outdir(self, tmp_path: Path) -> None:
        got = output_path(Path('/x/photo.png'), 'nord', outdir=tmp_path)
        assert got == tmp_path / 'photo_nord.png'


class TestResolveSchemesPath:
    def test_explicit_wins(self, monkeypatch, tmp_path: Path) -> None:
        monkeypatch.setenv(SCHEMES_ENV_VAR, str(tmp_path / 'env.yaml'))
        assert resolve_schemes_path(tmp_path / 'x.yaml') == tmp_path / 'x.yaml'

    def test_env(self, monkeypatch, tmp_path: Path) -> None:
        monkeypatch.setenv(SCHEMES_ENV_VAR, str(tmp_path / 'env.yaml'))
        assert resolve_schemes_path(None) == tmp_path / 'env.yaml'

    def test_bundled_default(self, monkeypatch) -> None:
        monkeypatch.delenv(SCHEMES_ENV_VAR, raising=False)
        assert resolve_schemes_path(None) == DEFAULT_SCHEMES_PATH


class TestRunConfig:
    def test_rejects_negative_radius(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            RunConfig(input_path=tmp_path / 'a.png', radius=-1)

    def test_requires_scheme_unless_interactive(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            RunConfig(input_path=tmp_path / 'a.png', scheme=None)
        RunConfig(input_path=tmp_path / 'a.png', scheme=None, interactive=True)

    def test_missing_scheme_rejected_at_run(self, tmp_path: Path) -> None:
        cfg = RunConfig(input_path=tmp_path / 'a.png')
        object.__setattr__(cfg, 'scheme', None)
        with pytest.raises(ConfigError):
            run_pipeline(cfg, catalog=parse_catalog(SCHEMES))


class TestRunPipeline:
    def test_fixed_scheme(self, image_file: Path, scheme_file: Path) -> None:
        cfg = RunConfig(input_path=image_file, scheme='mono', schemes_path=scheme_file)
        written = run_pipeline(cfg)
        assert written == [image_file.parent / 'photo_mono.png']
        out = load_image_rgba(written[0])
        assert out[0, 0].tolist() == [255, 255, 255, 77]
        assert out[3, 3].tolist() == [0, 0, 0, 77]

    def test_denoise_writes_second_variant(self, image_file: Path, scheme_file: Path) -> None:
        cfg = RunConfig(
            input_path=image_file,
            scheme='mono',
            schemes_path=scheme_file,
            denoise=True,
            workers=2,
        )
        written = run_pipeline(cfg)
        assert [p.name for p in written] == ['photo_mono.png', 'photo_mono_denoised.png']
        assert all(p.is_file() for p in written)

    def test_interactive(self, image_file: Path, tmp_path: Path) -> None:
        cat = parse_catalog(SCHEMES)
        cfg = RunConfig(input_path=image_file, scheme=None, interactive=True, outdir=tmp_path / 'o')
        written = run_pipeline(cfg, catalog=cat, read_line=lambda: '2\n')
        assert written == [tmp_path / 'o' / 'photo_red.png']
        assert (load_image_rgba(written[0])[..., :3] == [255, 0, 0]).all()

    def test_interactive_bad_input(self, image_file: Path) -> None:
        cat = parse_catalog(SCHEMES)
        cfg = RunConfig(input_path=image_file, scheme=None, interactive=True)
        with pytest.raises(InvalidSelectionError):
            run_pipeline(cfg, catalog=cat, read_line=lambda: '9\n')

    def test_unknown_scheme_writes_nothing(self, image_file: Path, scheme_file: Path) -> None:
        cfg = RunConfig(input_path=image_file, scheme='nonexistent', schemes_path=scheme_file)
        with pytest.raises(UnknownSchemeError):
            run_pipeline(cfg)
        assert sorted(p.name for p in image_file.parent.iterdir()) == ['photo.png', 'schemes.yaml']


class TestCli:
    def test_success(self, image_file: Path, scheme_file: Path) -> None:
        rc = main([str(image_file), '--scheme', 'mono', '--schemes', str(scheme_file), '--workers', '1'])
        assert rc == 0
        assert (image_file.parent / 'photo_mono.png').is_file()

    def test_list(self, scheme_file: Path, capsys) -> None:
        assert main(['--list', '--schemes', str(scheme_file)]) == 0
        assert capsys.readouterr().out.split() == ['mono', 'red']

    def test_unknown_scheme_exit_status(self, image_file: Path, scheme_file: Path, capsys) -> None:
        rc = main([str(image_file), '--scheme', 'nope', '--schemes', str(scheme_file)])
        assert rc == 2
        assert '[error]' in capsys.readouterr().err

    def test_missing_scheme_file(self, image_file: Path, tmp_path: Path, capsys) -> None:
        rc = main([str(image_file), '--schemes', str(tmp_path / 'missing.yaml')])
        assert rc == 2
        assert 'not found' in capsys.readouterr().err

    def test_missing_image(self, scheme_file: Path, tmp_path: Path) -> None:
        rc = main([str(tmp_path / 'none.png'), '--scheme', 'mono', '--schemes', str(scheme_file)])
        assert rc == 2

    def test_bad_radius_exit_status(self, image_file: Path, scheme_file: Path, capsys) -> None:
        rc = main([str(image_file), '--scheme', 'mono', '--schemes', str(scheme_file), '--radius', '-1'])
        assert rc == 2
        assert 'radius' in capsys.readouterr().err

    def test_internal_value_error_not_reported_as_user_error(
        self, image_file: Path, scheme_file: Path, monkeypatch
    ) -> None:
        def broken(config):
            raise ValueError('operands could not be broadcast together')

        monkeypatch.setattr(cli, 'run_pipeline', broken)
        with pytest.raises(ValueError, match='broadcast'):
            main([str(image_file), '--scheme', 'mono', '--schemes', str(scheme_file)])
