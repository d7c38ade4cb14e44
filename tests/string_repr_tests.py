"""
Unit tests for string representations
"""

import unittest
import flowscale as fs

from tests.test_config import (
    logicle_xform_262000__0_4__4_5__0_7,
    logicle_xform_10000__0_5__4_5__0,
    arcsinh_xform
)


class StringReprTestCase(unittest.TestCase):
    """Tests related to string representations of FlowScale classes"""

    def test_logicle_transform_repr(self):
        xform_string = "LogicleTransform(t: 262000, w: 0.4, m: 4.5, a: 0.7)"

        self.assertEqual(repr(logicle_xform_262000__0_4__4_5__0_7), xform_string)

    def test_logicle_transform_defaults_repr(self):
        xform_string = "LogicleTransform(t: 10000, w: 0.5, m: 4.5, a: 0)"

        self.assertEqual(repr(logicle_xform_10000__0_5__4_5__0), xform_string)

    def test_arcsinh_transform_repr(self):
        xform_string = "ArcsinhTransform(bottom: -120, top: 11000)"

        self.assertEqual(repr(arcsinh_xform), xform_string)

    def test_linear_scale_repr(self):
        scale = fs.scales.LinearScale(domain=(0, 100), range=(0, 500))
        scale_string = "LinearScale(domain: (0.0, 100.0), range: (0.0, 500.0))"

        self.assertEqual(repr(scale), scale_string)

    def test_log_scale_repr(self):
        scale = fs.scales.LogScale()
        scale_string = "LogScale(domain: (1.0, 10.0), range: (0.0, 1.0), base: 10)"

        self.assertEqual(repr(scale), scale_string)

    def test_transform_scale_repr(self):
        scale = fs.scales.TransformScale(arcsinh_xform, range=(0, 500))
        scale_string = (
            "TransformScale(ArcsinhTransform(bottom: -120, top: 11000), "
            "domain: (-120.0, 11000.0), range: (0.0, 500.0))"
        )

        self.assertEqual(repr(scale), scale_string)
