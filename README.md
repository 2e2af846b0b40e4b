# vehicledemo

The building blocks of a small wheeled-vehicle driving demo. It provides
the meshes, the materials, the vehicle and floor settings, the driver input
and the on-screen race clock. Each part is plain data or a pure function
that a renderer or a physics engine can consume.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `vehicledemo.geometry`

- `Mesh` is a dataclass of numpy arrays: `vertices` and `normals` with shape
  (n, 3), `tex_coords` with shape (n, 2), and flat `indices`. The `triangles`
  property returns the indices as rows of three.
- `create_box_mesh(size)` builds a box centred on the origin. `size` gives its
  half-extents. The box has 24 vertices (four per face) and 12 triangles.
- `create_cylinder_mesh(size, segments=16, up=(0, 1, 0))` builds a capped
  cylinder. Its radius is `size[0]` and its height is `size[1]`, and its axis
  is turned onto `up`. It has side rings, cap centres and texture coordinates.
  A negative `segments` or a zero `up` raises `ValueError`.
- `rotate_mesh(mesh, axis, angle)` returns a copy of the mesh with its
  vertices rotated by `angle` radians about `axis`. Normals are left as they
  were.
- `mesh_bounding_box_size(mesh)` returns the extent of the axis-aligned
  bounding box. An empty mesh gives zeros.

### `vehicledemo.timer`

- `Timer(duration, iterations=1, repeat=False, infinite=False)` accumulates
  time through `update(delta_time)`.
  - `just_completed` is true on the update that reached the duration.
  - `completed` is true once the last iteration has finished.
  - `has_elapsed()` tells whether `elapsed` has reached `duration`.
- A repeating timer wraps around without ever completing.
- An infinite timer only counts.

### `vehicledemo.materials`

- `load_materials()` returns a dict of `Material` entries. Each entry holds
  `ka`, `kd`, `ks` and `shininess`.
- The entries are keyed `"floor"` (light grey), `"car_body"` (red) and
  `"car_wheel"` (blue).

### `vehicledemo.controls`

- `DriverInput` holds `throttle`, `steering`, `brake` and `handbrake`.
  `is_active()` tells whether any of them is non-zero.
- `KeyBindings` maps each action to a key code. The defaults are W, A, D, S,
  Q and Space.
- `keyboard_driver_input(pressed, bindings=None)` turns a collection of
  pressed key codes into a `DriverInput`.
- `controller_driver_input(axes, buttons, velocity, rotation)` turns gamepad
  state into a `DriverInput`:
  - R2 is the throttle and L2 is the brake.
  - The left stick steers.
  - The circle button is the handbrake.
  - While the body moves backwards relative to its heading, L2 becomes
    reverse throttle instead of brake.
  - `rotation` is a quaternion given as (x, y, z, w).
  - It returns `None` when too few axes or buttons are reported.

### `vehicledemo.vehicle`

- `build_vehicle_settings(body_mesh)` turns the body mesh 90 degrees about Y
  and measures it. It logs the size and returns a `VehicleSettings` with:
  - four `WheelSettings`, where only the front wheels steer;
  - two `DifferentialSettings`, for four-wheel drive;
  - two `AntiRollBar` entries;
  - a cylinder wheel mesh;
  - a centre of mass lowered by half the body height.
- `build_floor_settings()` returns the `FloorSettings` of a 20 x 1 x 20 static
  box at the origin, together with its mesh.

### `vehicledemo.chrono`

- `RaceClock` runs a three-second start countdown when its `tick(delta_time)`
  method is called.
- Once the countdown has finished, the chronometer starts on the next tick.
- `text()` returns the display text.
- `chrono_text(elapsed)` formats a time, for example `Time elapsed: 1.50s`.

## Example

```python
from vehicledemo.geometry import create_box_mesh, create_cylinder_mesh
from vehicledemo.controls import keyboard_driver_input, KeyBindings
from vehicledemo.chrono import RaceClock

box = create_box_mesh((1.0, 1.0, 1.0))
wheel = create_cylinder_mesh((0.34, 0.285, 0.34), 16, (1.0, 0.0, 0.0))

bindings = KeyBindings()
driver = keyboard_driver_input({bindings.forward}, bindings)
print(driver.throttle, driver.is_active())

clock = RaceClock()
for _ in range(240):
    clock.tick(1 / 60)
print(clock.text())
```

## What this package does not do

- There is no program to run.
- It opens no window and draws nothing.
- It steps no physics and reads no keyboard or gamepad itself. Callers pass
  the pressed keys, axes, buttons and body state in.
- It does not load model files. `build_vehicle_settings` expects the body
  mesh to be loaded by the caller and passed in as a `Mesh`.