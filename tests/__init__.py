"""
FlowScale Test Suites
"""
import unittest

from tests.transform_tests import LogicleTransformTestCase, ArcsinhTransformTestCase, NiceRoundingTestCase
from tests.scale_tests import LinearScaleTestCase, LogScaleTestCase, TransformScaleTestCase
from tests.scale_utils_tests import CreateScaleTestCase, GetScalesTestCase, PlotImageKeyTestCase
from tests.plot_tests import PlotTestCase
from tests.string_repr_tests import StringReprTestCase

if __name__ == "__main__":
    unittest.main()
