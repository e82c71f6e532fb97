import unittest
from pathlib import Path
from android_res.listing import bucket_columns, render_listing

RES = Path("/res")

class TestListing(unittest.TestCase):
    def test_single_qualified(self):
        entries = {"image.png": [RES / "drawable-mdpi" / "image.png"]}
        self.assertEqual(render_listing("drawable", entries), "image.png mdpi\n")

    def test_single_unqualified(self):
        entries = {"image.xml": [RES / "drawable" / "image.xml"]}
        self.assertEqual(render_listing("drawable", entries), "image.xml\n")

    def test_empty(self):
        self.assertEqual(render_listing("drawable", {}), "")

    def test_padding_and_blank_columns(self):
        entries = {
            "logo.png": [RES / "drawable-mdpi" / "logo.png"],
            "ic_launcher.png": [RES / "drawable-hdpi" / "ic_launcher.png",
                                RES / "drawable-mdpi" / "ic_launcher.png"],
            "bg.xml": [RES / "drawable" / "bg.xml"],
        }

        result = render_listing("drawable", entries)

        expected = [
            "bg.xml".ljust(15) + " " + " " * 4 + " " + " " * 4 + "\n",
            "ic_launcher.png hdpi mdpi\n",
            "logo.png".ljust(15) + " " + " " * 4 + " mdpi\n",
        ]
        self.assertEqual(result, "".join(expected))

    def test_column_order_follows_sorted_names(self):
        """Columns come from the name-sorted walk, not the dict order."""
        entries = {
            "z.png": [RES / "drawable-xxhdpi" / "z.png"],
            "a.png": [RES / "drawable-mdpi" / "a.png"],
        }
        reordered = dict(reversed(list(entries.items())))

        self.assertEqual(bucket_columns("drawable", entries), ["mdpi", "xxhdpi"])
        self.assertEqual(render_listing("drawable", entries), render_listing("drawable", reordered))
        self.assertEqual(
            render_listing("drawable", entries),
            "a.png mdpi " + " " * 6 + "\n" + "z.png " + " " * 4 + " xxhdpi\n",
        )

    def test_layout_land(self):
        entries = {"main.xml": [RES / "layout" / "main.xml", RES / "layout-land" / "main.xml"]}
        self.assertEqual(render_listing("layout", entries), "main.xml land\n")

if __name__ == "__main__":
    unittest.main()
