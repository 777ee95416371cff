"""
Tests for keyword classification
"""

import unittest

from src.obstacle_alert.models import (
    KEYWORD_TABLE,
    DetectedLabel,
    DetectedObject,
    ObstacleCategory,
)
from src.obstacle_alert.pipeline import classify, classify_names


class TestClassifyNames(unittest.TestCase):
    """Test ordered first-match classification."""

    def test_each_category_keyword(self):
        """Test a keyword from each category classifies to that category."""
        cases = {
            "Staircase": ObstacleCategory.STAIRS,
            "Door": ObstacleCategory.WALL,
            "Backpack": ObstacleCategory.LOW,
            "Mirror": ObstacleCategory.HEAD,
            "Chandelier": ObstacleCategory.CEILING,
        }
        for name, expected in cases.items():
            with self.subTest(name=name):
                self.assertEqual(classify_names([name]), expected)

    def test_every_keyword_without_earlier_match(self):
        """Test every keyword classifies to its own category unless shadowed."""
        for index, (category, keywords) in enumerate(KEYWORD_TABLE):
            earlier = [kw for _, kws in KEYWORD_TABLE[:index] for kw in kws]
            for keyword in keywords:
                if any(kw in keyword for kw in earlier):
                    continue
                with self.subTest(keyword=keyword):
                    self.assertEqual(classify_names([keyword]), category)

    def test_empty_input_is_default(self):
        """Test no names at all classifies as default."""
        self.assertEqual(classify_names([]), ObstacleCategory.DEFAULT)

    def test_unknown_name_is_default(self):
        """Test a name with no keywords classifies as default."""
        self.assertEqual(classify_names(["Person", "Sky"]), ObstacleCategory.DEFAULT)

    def test_case_insensitive(self):
        """Test matching ignores case."""
        self.assertEqual(classify_names(["STAIRS"]), ObstacleCategory.STAIRS)

    def test_substring_match(self):
        """Test keywords match inside longer names."""
        self.assertEqual(classify_names(["Kitchen table"]), ObstacleCategory.LOW)

    def test_earlier_category_wins(self):
        """Test category order beats name order."""
        names = ["Lamp", "Floor", "Stairs"]
        self.assertEqual(classify_names(names), ObstacleCategory.STAIRS)

    def test_ceiling_fan_matches_head_before_ceiling(self):
        """Test 'ceiling fan' hits head's 'fan' before ceiling is checked."""
        self.assertEqual(classify_names(["Ceiling fan"]), ObstacleCategory.HEAD)

    def test_window_blind_matches_wall(self):
        """Test 'window blind' hits wall's 'window' first."""
        self.assertEqual(classify_names(["Window blind"]), ObstacleCategory.WALL)


class TestClassify(unittest.TestCase):
    """Test classification over objects and labels."""

    def test_combines_objects_and_labels(self):
        """Test labels are considered alongside object names."""
        objects = [DetectedObject(name="Person")]
        labels = [DetectedLabel(description="Wall", score=0.8)]
        self.assertEqual(classify(objects, labels), ObstacleCategory.WALL)

    def test_defaults_to_empty(self):
        """Test calling without arguments classifies as default."""
        self.assertEqual(classify(), ObstacleCategory.DEFAULT)


if __name__ == "__main__":
    unittest.main()
