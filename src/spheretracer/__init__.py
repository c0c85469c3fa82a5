"""
CPU path tracer for scenes of spheres with diffuse, metal and glass materials.

Subpackages:
    core: vectors, rays and sampling helpers
    geometry: hit records, spheres and the scene list
    materials: scattering models
    camera: pinhole camera
    renderer: integrator, color output, progress and preview
"""

__version__ = "0.1.0"
