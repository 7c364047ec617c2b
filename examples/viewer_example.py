"""Interactive viewer: drag with the left mouse button to pan, scroll to zoom."""

from gravity_sim import Simulator
from gravity_sim.presets import SunPlanets
from gravity_sim.render import Camera, Renderer2D

def main():
    templates = SunPlanets(extended=True).generate()
    sim = Simulator()
    sim.initialize(templates)
    
    renderer = Renderer2D(templates, camera=Camera(scale=2.0), show_trails=True)
    
    for _ in range(5000):
        sim.step()
        renderer.render(sim.system.positions)
        if not renderer.is_open:
            break
    
    renderer.close()

if __name__ == "__main__":
    main()
