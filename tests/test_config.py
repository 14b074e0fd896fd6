"""Tests for configuration files."""

import json
import pytest
from nbody_sim.physics.integrators import ExplicitEulerIntegrator, SemiImplicitEulerIntegrator
from nbody_sim.physics.kernel import G
from nbody_sim.render.renderer_2d import Renderer2D
from nbody_sim.utils.config import Config, load_config, save_config


def test_defaults():
    config = Config()
    assert config.gravitational_constant == G
    assert config.force_method == "vectorized"
    assert config.integrator == "semi_implicit_euler"
    assert config.render is False


@pytest.mark.parametrize("suffix", [".json", ".yaml", ".yml"])
def test_save_load(tmp_path, suffix):
    config = Config(gravitational_constant=1.0, force_method="direct", integrator="euler", frame_delay=0.05)
    path = tmp_path / f"config{suffix}"

    save_config(config, str(path))
    loaded = load_config(str(path))

    assert loaded == config


def test_load_partial_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"force_method": "direct"}))
    config = load_config(str(path))
    assert config.force_method == "direct"
    assert config.gravitational_constant == G


def test_load_rejects_unknown_keys(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("preset: spiral\n")
    with pytest.raises(TypeError):
        load_config(str(path))


def test_build_simulator():
    sim = Config(gravitational_constant=1.0, force_method="direct").build_simulator()
    assert sim.G == 1.0
    assert sim.force_calculator.method == "direct"
    assert sim.force_calculator.G == 1.0
    assert isinstance(sim.integrator, SemiImplicitEulerIntegrator)

    sim = Config(integrator="euler").build_simulator()
    assert isinstance(sim.integrator, ExplicitEulerIntegrator)


def test_build_simulator_rejects_unknown_names():
    with pytest.raises(ValueError):
        Config(integrator="leapfrog").build_simulator()
    with pytest.raises(ValueError):
        Config(force_method="tree").build_simulator()
    with pytest.raises(ValueError):
        Config(backend="cupy").build_simulator()


def test_build_renderer():
    assert Config().build_renderer() is None
    renderer = Config(render=True, frame_delay=0.0, render_every=5).build_renderer(interactive=False)
    assert isinstance(renderer, Renderer2D)
    assert renderer.render_every == 5
    assert renderer.frame_delay == 0.0
    assert renderer.image_dir is None


def test_render_settings_round_trip(tmp_path):
    config = Config(render=True, render_every=10, image_dir="images")
    path = tmp_path / "config.yaml"
    save_config(config, str(path))
    loaded = load_config(str(path))

    assert loaded.render_every == 10
    renderer = loaded.build_renderer(interactive=False)
    assert renderer.render_every == 10
    assert renderer.image_dir == "images"
