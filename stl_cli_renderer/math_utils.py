#
# PROJECT: stl-cli-renderer
# MODULE: stl_cli_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math


class Vec3:
    """Immutable 3-component vector."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vec3 is immutable")

    def __delattr__(self, name):
        raise AttributeError("Vec3 is immutable")

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return self.x == other.x and self.y == other.y and self.z == other.z
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __truediv__(self, scalar):
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def component_min(self, other) -> 'Vec3':
        return Vec3(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))

    def component_max(self, other) -> 'Vec3':
        return Vec3(max(self.x, other.x), max(self.y, other.y), max(self.z, other.z))


class Mat3:
    """3x3 rotation matrix, [row][col] storage.

    Column vectors: ``a @ b`` applied to a point runs ``b`` first, then ``a``.
    """
    __slots__ = ('m',)

    def __init__(self, data=None):
        if data:
            self.m = [list(map(float, row)) for row in data]
        else:
            self.m = [[0.0] * 3 for _ in range(3)]

    def __repr__(self):
        return f"Mat3({self.m!r})"

    @classmethod
    def identity(cls) -> 'Mat3':
        res = cls()
        for i in range(3):
            res.m[i][i] = 1.0
        return res

    @classmethod
    def rotation_x(cls, rad: float) -> 'Mat3':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls([
            [1, 0, 0],
            [0, c, -s],
            [0, s, c],
        ])

    @classmethod
    def rotation_y(cls, rad: float) -> 'Mat3':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls([
            [c, 0, s],
            [0, 1, 0],
            [-s, 0, c],
        ])

    @classmethod
    def rotation_z(cls, rad: float) -> 'Mat3':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls([
            [c, -s, 0],
            [s, c, 0],
            [0, 0, 1],
        ])

    @classmethod
    def rotation_xyz(cls, rx: float, ry: float, rz: float) -> 'Mat3':
        """Rz @ Ry @ Rx: a point is rotated about X, then Y, then Z."""
        return cls.rotation_z(rz) @ cls.rotation_y(ry) @ cls.rotation_x(rx)

    def __matmul__(self, other):
        if isinstance(other, Mat3):
            res = Mat3()
            for r in range(3):
                for c in range(3):
                    val = 0.0
                    for k in range(3):
                        val += self.m[r][k] * other.m[k][c]
                    res.m[r][c] = val
            return res
        return NotImplemented

    def mul_vec3(self, v: Vec3) -> Vec3:
        m = self.m
        return Vec3(
            m[0][0] * v.x + m[0][1] * v.y + m[0][2] * v.z,
            m[1][0] * v.x + m[1][1] * v.y + m[1][2] * v.z,
            m[2][0] * v.x + m[2][1] * v.y + m[2][2] * v.z,
        )
