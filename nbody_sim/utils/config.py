"""Configuration management."""

import json
import yaml
from pathlib import Path
from dataclasses import dataclass, asdict
from typing import Optional
from nbody_sim.physics import kernel


@dataclass
class Config:
    """Simulation configuration."""
    # Physics
    gravitational_constant: float = kernel.G
    force_method: str = "vectorized"
    integrator: str = "semi_implicit_euler"
    backend: str = "numpy"
    
    # Rendering
    render: bool = False
    frame_delay: float = 0.01
    render_every: int = 1
    image_dir: Optional[str] = None
    
    def build_simulator(self):
        """Create a Simulator configured from this object."""
        from nbody_sim.backends.factory import get_backend
        from nbody_sim.physics.integrators import get_integrator
        from nbody_sim.physics.simulator import Simulator
        
        return Simulator(
            backend=get_backend(self.backend),
            integrator=get_integrator(self.integrator),
            G=self.gravitational_constant,
            force_method=self.force_method,
        )
    
    def build_renderer(self, **kwargs):
        """Create a Renderer2D if rendering is enabled, else None."""
        if not self.render:
            return None
        from nbody_sim.render.renderer_2d import Renderer2D
        
        return Renderer2D(frame_delay=self.frame_delay, render_every=self.render_every,
                          image_dir=self.image_dir, **kwargs)


def load_config(config_path: str) -> Config:
    """Load configuration from file.
    
    Args:
        config_path: Path to config file (.json or .yaml)
        
    Returns:
        Config object
    """
    config_path = Path(config_path)
    
    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f) or {}
        else:
            data = json.load(f)
    
    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.
    
    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)
    
    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
