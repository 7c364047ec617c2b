"""Basic example of using the gravity simulator."""

from gravity_sim import Simulator
from gravity_sim.presets import SunPlanets

def main():
    """Run the sun and planets scene and print conserved quantities."""
    # Scene setup: ordered body templates
    templates = SunPlanets().generate()
    
    # Fixed dt = 1.5, semi-implicit Euler, direct pairwise forces
    sim = Simulator()
    sim.initialize(templates)
    
    print("Running simulation...")
    print(f"Initial energy: {sim.get_energy():.6f}")
    
    for step in range(1000):
        sim.step()
        if step % 200 == 0:
            px, py = sim.get_momentum()
            print(f"Step {step}: Time={sim.time:.2f}, Energy={sim.get_energy():.6f}, "
                  f"Momentum=({px:.2e}, {py:.2e})")
    
    for template, body in zip(templates, sim.bodies()):
        x, y = body.position
        print(f"{template.color:>7}: position=({x:.2f}, {y:.2f})")
    print("Simulation complete!")

if __name__ == "__main__":
    main()
