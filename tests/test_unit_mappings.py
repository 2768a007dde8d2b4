"""
Tests for the unit mappings.
"""

import math
import unittest
import warnings

import numpy as np

from telemap.config import WireType
from telemap.geometry import Rotation2d, Rotation3d, Translation3d
from telemap.mapping import (
    DISTANCE_MAPPING,
    ROTATION2D_MAPPING,
    ROTATION3D_MAPPING,
    TRANSLATION3D_MAPPING,
    Mapping,
)
from telemap.unit import Degree, Foot, Inch, Meter

# Recognized literals plus configs that must behave like the default
DISTANCE_CONFIGS = ("inches", "meters", None, "", "bogus")
ROTATION_CONFIGS = ("degrees", "radians", "rotations", None, "", "bogus")


class TestMappingDeclarations(unittest.TestCase):
    """Test the declared field/wire types."""

    def test_scalar_tags(self):
        """Test scalar mappings declare a double."""
        for mapping in (DISTANCE_MAPPING, ROTATION2D_MAPPING):
            self.assertIs(mapping.wire_type, float)
            self.assertIs(mapping.wire_type_tag, WireType.DOUBLE)

    def test_array_tags(self):
        """Test array mappings declare a double array."""
        for mapping in (TRANSLATION3D_MAPPING, ROTATION3D_MAPPING):
            self.assertIs(mapping.wire_type, np.ndarray)
            self.assertIs(mapping.wire_type_tag, WireType.DOUBLE_ARRAY)

    def test_field_types(self):
        """Test each mapping names its field type."""
        self.assertIs(DISTANCE_MAPPING.field_type, Meter)
        self.assertIs(ROTATION2D_MAPPING.field_type, Rotation2d)
        self.assertIs(TRANSLATION3D_MAPPING.field_type, Translation3d)
        self.assertIs(ROTATION3D_MAPPING.field_type, Rotation3d)

    def test_stateless(self):
        """Test mapping instances hold no attributes."""
        with self.assertRaises(AttributeError):
            DISTANCE_MAPPING.cache = {}

    def test_mismatched_tag_rejected(self):
        """Test a wire type that the tag cannot carry is a class error."""
        with self.assertRaises(TypeError):
            class BadMapping(Mapping, field_type=Meter, wire_type=float,
                             wire_type_tag=WireType.DOUBLE_ARRAY):
                pass

    def test_partial_declaration_rejected(self):
        """Test declaring only some of the types is a class error."""
        with self.assertRaises(TypeError):
            class HalfMapping(Mapping, field_type=Meter):
                pass

    def test_repr(self):
        """Test the repr names the types."""
        self.assertEqual(repr(DISTANCE_MAPPING), "DistanceMapping(Meter <-> double)")


class TestDistanceMapping(unittest.TestCase):
    """Test DISTANCE_MAPPING."""

    def test_inches(self):
        """Test one meter published in inches."""
        self.assertAlmostEqual(DISTANCE_MAPPING.to_wire(Meter(1), "inches"), 39.3701, places=4)

    def test_meters(self):
        """Test one meter published in meters."""
        self.assertAlmostEqual(DISTANCE_MAPPING.to_wire(Meter(1), "meters"), 1.0)

    def test_default_is_base_unit(self):
        """Test the default publishes the base-unit magnitude."""
        self.assertAlmostEqual(DISTANCE_MAPPING.to_wire(Foot(1)), 0.3048)

    def test_default_equivalence(self):
        """Test None, empty and unknown configs match the base unit."""
        value = Inch(17)
        expected = DISTANCE_MAPPING.to_wire(value, "meters")
        for config in (None, "", "bogus"):
            self.assertEqual(DISTANCE_MAPPING.to_wire(value, config), expected)

    def test_to_field(self):
        """Test reading values in each unit."""
        self.assertAlmostEqual(float(DISTANCE_MAPPING.to_field(12.0, "inches")), 0.3048)
        self.assertAlmostEqual(float(DISTANCE_MAPPING.to_field(2.5, "meters")), 2.5)
        self.assertAlmostEqual(float(DISTANCE_MAPPING.to_field(2.5)), 2.5)
        self.assertIsInstance(DISTANCE_MAPPING.to_field(1.0, "inches"), Meter)

    def test_round_trip(self):
        """Test to_field inverts to_wire for every config."""
        for value in (Meter(0.0), Meter(1.25), Inch(-3.0), Foot(1000.0)):
            for config in DISTANCE_CONFIGS:
                result = DISTANCE_MAPPING.to_field(DISTANCE_MAPPING.to_wire(value, config), config)
                self.assertTrue(math.isclose(float(result), float(value), rel_tol=1e-9, abs_tol=1e-12))


class TestRotation2dMapping(unittest.TestCase):
    """Test ROTATION2D_MAPPING."""

    def test_radians(self):
        """Test 90 degrees published in radians."""
        wire = ROTATION2D_MAPPING.to_wire(Rotation2d.from_degrees(90), "radians")
        self.assertAlmostEqual(wire, 1.5708, places=4)

    def test_rotations(self):
        """Test one full turn published in rotations."""
        wire = ROTATION2D_MAPPING.to_wire(Rotation2d.from_rotations(1), "rotations")
        self.assertAlmostEqual(wire, 1.0)

    def test_default_is_degrees(self):
        """Test None, empty and unknown configs publish degrees."""
        value = Rotation2d.from_radians(1.0)
        expected = ROTATION2D_MAPPING.to_wire(value, "degrees")
        self.assertAlmostEqual(expected, math.degrees(1.0))
        for config in (None, "", "bogus"):
            self.assertEqual(ROTATION2D_MAPPING.to_wire(value, config), expected)

    def test_to_field(self):
        """Test reading values in each unit."""
        self.assertEqual(ROTATION2D_MAPPING.to_field(0.25, "rotations"), Rotation2d.from_degrees(90))
        self.assertEqual(ROTATION2D_MAPPING.to_field(math.pi, "radians"), Rotation2d.from_degrees(180))
        self.assertEqual(ROTATION2D_MAPPING.to_field(45.0), Rotation2d.from_degrees(45))

    def test_full_turns_preserved(self):
        """Test angles beyond one turn survive the wire."""
        value = Rotation2d.from_degrees(720)
        self.assertAlmostEqual(ROTATION2D_MAPPING.to_wire(value, "rotations"), 2.0)

    def test_round_trip(self):
        """Test to_field inverts to_wire for every config."""
        for degrees in (0.0, 30.0, -135.0, 400.0):
            value = Rotation2d.from_degrees(degrees)
            for config in ROTATION_CONFIGS:
                result = ROTATION2D_MAPPING.to_field(ROTATION2D_MAPPING.to_wire(value, config), config)
                self.assertEqual(result, value)
                self.assertAlmostEqual(result.degrees, degrees)


class TestTranslation3dMapping(unittest.TestCase):
    """Test TRANSLATION3D_MAPPING."""

    def test_to_wire(self):
        """Test (1, 2, 3) is published as-is."""
        wire = TRANSLATION3D_MAPPING.to_wire(Translation3d(1.0, 2.0, 3.0))
        self.assertIsInstance(wire, np.ndarray)
        self.assertEqual(wire.dtype, np.float64)
        np.testing.assert_array_equal(wire, [1.0, 2.0, 3.0])

    def test_config_ignored(self):
        """Test every config gives the same meters array."""
        value = Translation3d(Inch(10), 0.5, -2.0)
        expected = TRANSLATION3D_MAPPING.to_wire(value)
        for config in ("inches", "meters", "degrees", "", None):
            np.testing.assert_array_equal(TRANSLATION3D_MAPPING.to_wire(value, config), expected)

    def test_order(self):
        """Test element 0/1/2 is x/y/z."""
        value = TRANSLATION3D_MAPPING.to_field([7.0, 8.0, 9.0])
        self.assertEqual(float(value.x), 7.0)
        self.assertEqual(float(value.y), 8.0)
        self.assertEqual(float(value.z), 9.0)

    def test_accepts_arrays_and_tuples(self):
        """Test any three-element sequence is read."""
        expected = Translation3d(1.0, 2.0, 3.0)
        self.assertEqual(TRANSLATION3D_MAPPING.to_field(np.array([1.0, 2.0, 3.0])), expected)
        self.assertEqual(TRANSLATION3D_MAPPING.to_field((1.0, 2.0, 3.0)), expected)

    def test_wrong_length(self):
        """Test length 2 and 4 arrays fail."""
        for values in ([1.0, 2.0], [1.0, 2.0, 3.0, 4.0]):
            with self.assertRaises(IndexError):
                TRANSLATION3D_MAPPING.to_field(values)

    def test_round_trip(self):
        """Test to_field inverts to_wire."""
        value = Translation3d(-0.25, 3.5, 1e3)
        for config in (None, "bogus"):
            result = TRANSLATION3D_MAPPING.to_field(TRANSLATION3D_MAPPING.to_wire(value, config), config)
            self.assertEqual(result, value)


class TestRotation3dMapping(unittest.TestCase):
    """Test ROTATION3D_MAPPING."""

    def test_single_axis_default(self):
        """Test 90 degrees about z is published as [0, 0, 90]."""
        wire = ROTATION3D_MAPPING.to_wire(Rotation3d(0.0, 0.0, math.pi / 2))
        self.assertEqual(wire.shape, (3,))
        np.testing.assert_allclose(wire, [0.0, 0.0, 90.0], atol=1e-9)

    def test_single_axis_each_position(self):
        """Test each axis lands in its own element."""
        np.testing.assert_allclose(
            ROTATION3D_MAPPING.to_wire(Rotation3d(math.pi / 2, 0.0, 0.0)), [90.0, 0.0, 0.0], atol=1e-9
        )
        np.testing.assert_allclose(
            ROTATION3D_MAPPING.to_wire(Rotation3d(0.0, math.pi / 6, 0.0)), [0.0, 30.0, 0.0], atol=1e-9
        )

    def test_pitch_quarter_turn(self):
        """Test 90 degrees about y maps both ways without a warning."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            wire = ROTATION3D_MAPPING.to_wire(Rotation3d(0.0, math.pi / 2, 0.0))
            value = ROTATION3D_MAPPING.to_field([0.0, 90.0, 0.0])
        np.testing.assert_allclose(wire, [0.0, 90.0, 0.0], atol=1e-9)
        self.assertEqual(value, Rotation3d(0.0, math.pi / 2, 0.0))
        np.testing.assert_allclose(ROTATION3D_MAPPING.to_wire(value), [0.0, 90.0, 0.0], atol=1e-9)

    def test_units(self):
        """Test the selected unit applies to all three elements."""
        value = Rotation3d(math.pi / 2, -math.pi / 4, 3 * math.pi / 4)
        np.testing.assert_allclose(
            ROTATION3D_MAPPING.to_wire(value, "radians"), [math.pi / 2, -math.pi / 4, 3 * math.pi / 4], atol=1e-9
        )
        wire = ROTATION3D_MAPPING.to_wire(value, "rotations")
        self.assertAlmostEqual(wire[0], 0.25)
        self.assertAlmostEqual(wire[1], -0.125)
        self.assertAlmostEqual(wire[2], 0.375)

    def test_default_equivalence(self):
        """Test None, empty and unknown configs publish degrees."""
        value = Rotation3d(0.1, 0.2, 0.3)
        expected = ROTATION3D_MAPPING.to_wire(value, "degrees")
        for config in (None, "", "bogus"):
            np.testing.assert_array_equal(ROTATION3D_MAPPING.to_wire(value, config), expected)

    def test_to_field(self):
        """Test reading per-axis angles in each unit."""
        expected = Rotation3d(0.0, 0.0, math.pi / 2)
        self.assertEqual(ROTATION3D_MAPPING.to_field([0.0, 0.0, 90.0]), expected)
        self.assertEqual(ROTATION3D_MAPPING.to_field([0.0, 0.0, math.pi / 2], "radians"), expected)
        self.assertEqual(ROTATION3D_MAPPING.to_field([0.0, 0.0, 0.25], "rotations"), expected)
        self.assertAlmostEqual(ROTATION3D_MAPPING.to_field([0.0, 0.0, 90.0]).measure_z.to(Degree), 90.0)

    def test_wrong_length(self):
        """Test length 2 and 4 arrays fail."""
        for values in ([10.0, 20.0], [10.0, 20.0, 30.0, 40.0]):
            with self.assertRaises(IndexError):
                ROTATION3D_MAPPING.to_field(values, "radians")

    def test_round_trip(self):
        """Test to_field inverts to_wire for every config."""
        values = (
            Rotation3d(),
            Rotation3d(0.1, -0.2, 0.3),
            Rotation3d(-2.5, 1.2, 3.0),
            Rotation3d.from_axis_angle([1.0, 1.0, 1.0], 1.0),
        )
        for value in values:
            for config in ROTATION_CONFIGS:
                result = ROTATION3D_MAPPING.to_field(ROTATION3D_MAPPING.to_wire(value, config), config)
                self.assertEqual(result, value)
                np.testing.assert_allclose(result.quaternion * np.sign(np.dot(result.quaternion, value.quaternion)),
                                           value.quaternion, atol=1e-9)


if __name__ == '__main__':
    unittest.main()
