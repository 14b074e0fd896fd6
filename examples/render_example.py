"""Animate a random cluster with the 2D renderer."""

from nbody_sim.presets import StarCluster
from nbody_sim.utils import Config

def main():
    """Run a 30-body cluster with rendering enabled."""
    config = Config(render=True, frame_delay=0.001, render_every=2)
    sim = config.build_simulator()
    renderer = config.build_renderer(show_labels=False)
    
    sim.initialize(*StarCluster(n_bodies=30, seed=42).generate())
    sim.add_observer(renderer.observer)
    
    try:
        sim.run(3.15576e7, 50000.0)
    finally:
        renderer.close()
    print(f"Ran {sim.step_count} steps")

if __name__ == "__main__":
    main()
