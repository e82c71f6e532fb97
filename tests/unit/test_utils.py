import re
import unittest
from pathlib import Path
from android_res.utils import sanitize_name, is_resource_type_dir, is_resource_file, bucket_suffix

class TestSanitizeName(unittest.TestCase):
    def test_plain_name_unchanged(self):
        self.assertEqual(sanitize_name("image.png"), "image.png")

    def test_underscore_kept(self):
        self.assertEqual(sanitize_name("my_image.png"), "my_image.png")

    def test_space_becomes_underscore(self):
        self.assertEqual(sanitize_name("my image.png"), "my_image.png")

    def test_uppercase_lowered(self):
        self.assertEqual(sanitize_name("My Image.PNG"), "my_image.png")

    def test_dash_becomes_underscore(self):
        self.assertEqual(sanitize_name("ic-launcher.xml"), "ic_launcher.xml")

    def test_other_characters_dropped(self):
        self.assertEqual(sanitize_name("ic(1)+é!.png"), "ic1.png")

    def test_uses_final_component(self):
        self.assertEqual(sanitize_name(Path("res/drawable-mdpi/Icon 2.png")), "icon_2.png")

    def test_no_file_name(self):
        self.assertIsNone(sanitize_name("/"))
        self.assertIsNone(sanitize_name(""))

    def test_output_alphabet(self):
        """Output only ever contains [a-z0-9._]."""
        samples = ["ÄBC-def 12.PNG", "a~b`c@d#e$.xml", "  --  ", "日本語.png", "Tab\tName.png"]
        for sample in samples:
            result = sanitize_name(sample)
            self.assertRegex(result, re.compile(r"^[a-z0-9._]*$"))


class TestClassifier(unittest.TestCase):
    def test_resource_type_dir_exact(self):
        self.assertTrue(is_resource_type_dir("drawable", "drawable"))

    def test_resource_type_dir_qualified(self):
        self.assertTrue(is_resource_type_dir("drawable", "drawable-mdpi"))

    def test_resource_type_dir_other_type(self):
        self.assertFalse(is_resource_type_dir("drawable", "layout"))

    def test_resource_type_dir_bad(self):
        self.assertFalse(is_resource_type_dir("drawable", "bad"))

    def test_resource_type_dir_prefix_only(self):
        # Coarse prefix match
        self.assertTrue(is_resource_type_dir("drawable", "drawableX"))

    def test_resource_type_dir_full_path(self):
        self.assertTrue(is_resource_type_dir("layout", Path("/res/layout-land")))
        self.assertFalse(is_resource_type_dir("layout", "/"))

    def test_resource_file_png(self):
        self.assertTrue(is_resource_file("image.png"))

    def test_resource_file_xml(self):
        self.assertTrue(is_resource_file(Path("layout/main.xml")))

    def test_resource_file_other_extension(self):
        self.assertFalse(is_resource_file("x.jpg"))

    def test_resource_file_no_extension(self):
        self.assertFalse(is_resource_file("not-image"))

    def test_resource_file_case_sensitive(self):
        self.assertFalse(is_resource_file("IMAGE.PNG"))


class TestBucketSuffix(unittest.TestCase):
    def test_qualified(self):
        self.assertEqual(bucket_suffix("drawable", "drawable-mdpi"), "mdpi")

    def test_unqualified(self):
        self.assertIsNone(bucket_suffix("drawable", "drawable"))

    def test_last_segment_only(self):
        self.assertEqual(bucket_suffix("values", "values-en-rUS"), "rUS")

    def test_empty_qualifier(self):
        self.assertIsNone(bucket_suffix("drawable", "drawable-"))

if __name__ == "__main__":
    unittest.main()
