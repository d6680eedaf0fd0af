from PIL import Image

from wizard_tester.utils.imaging import annotate_failure


def test_failure_banner(tmp_path):
    shot = tmp_path / "failure.png"
    Image.new("RGB", (200, 120), color="white").save(shot)

    out = annotate_failure(shot, ["Step 2", "NavigationTimeout: Could not find step 2/7"])
    print(f"Annotated: {out}")
    assert out == tmp_path / "failure_annotated.png"

    img = Image.open(out).convert("RGB")
    assert img.size == (200, 120)
    assert img.getpixel((0, 0)) == (160, 0, 0)
    assert img.getpixel((199, 119)) == (255, 255, 255)

    # the source screenshot is left untouched
    assert Image.open(shot).convert("RGB").getpixel((0, 0)) == (255, 255, 255)


def test_explicit_output_path(tmp_path):
    shot = tmp_path / "raw.png"
    Image.new("RGB", (50, 50), color="black").save(shot)
    out = annotate_failure(shot, ["x"], out_path=tmp_path / "custom.png")
    assert out.exists()
    assert out.name == "custom.png"
