"""Basic example of using the N-body simulator."""

from nbody_sim import Simulator
from nbody_sim.io import format_universe
from nbody_sim.presets import InnerSolarSystem

def main():
    """Run the inner solar system for one Earth year."""
    body_count, radius, bodies = InnerSolarSystem().generate()
    
    sim = Simulator()
    sim.initialize(body_count, radius, bodies)
    
    print("Running simulation...")
    print(f"Initial energy: {sim.get_energy():.6e}")
    
    def report(s):
        if s.step_count % 250 == 0:
            print(f"Step {s.step_count}: Time={s.time:.3e}, Energy={s.get_energy():.6e}")
    
    sim.add_observer(report)
    sim.run(3.15576e7, 25000.0)
    
    print(f"Final energy: {sim.get_energy():.6e}")
    print(format_universe(sim.final_state()))

if __name__ == "__main__":
    main()
