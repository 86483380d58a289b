from wdfunpack.dictionary import DEFAULT_EXTS, DEFAULT_SAMPLE_FORMATS, DictionaryManager


def test_defaults():
    manager = DictionaryManager()
    assert (manager.depth, manager.tries) == (3, 500)
    assert manager.exts == ["png", "dds", "bmp"]
    assert manager.fragments == set()


def test_make_params_line_defaults():
    assert DictionaryManager().make_params_line() == "depth=3;tries=500;exts=png,dds,bmp"


def test_parse_params_line():
    manager = DictionaryManager()
    manager.parse_params_line("depth=5;tries=10;exts=tga,,jpg,")
    assert (manager.depth, manager.tries) == (5, 10)
    assert manager.exts == ["tga", "jpg"]


def test_parse_params_line_resets_and_defaults():
    manager = DictionaryManager()
    manager.set_params(9, 9, ["x"])
    manager.parse_params_line("depth= 7x;tries=abc;junk")
    assert (manager.depth, manager.tries) == (7, 0)
    assert manager.exts == list(DEFAULT_EXTS)


def test_params_round_trip():
    manager = DictionaryManager()
    manager.set_params(4, 20, ("tga", "jpg"))
    other = DictionaryManager()
    other.parse_params_line(manager.make_params_line())
    assert (other.depth, other.tries, other.exts) == (4, 20, ["tga", "jpg"])


def test_add_path_fragments():
    manager = DictionaryManager()
    manager.add_path_fragments("data/ui\\btn_ok-1..png/")
    assert manager.fragments == {"data", "ui", "btn", "ok", "1", "png"}


def test_merge_fragments():
    manager = DictionaryManager()
    manager.add_path_fragments("a/b")
    manager.merge_fragments({"b", "c"})
    assert manager.fragments == {"a", "b", "c"}


def test_load_missing_file(tmp_path):
    manager = DictionaryManager()
    manager.merge_fragments({"old"})
    assert manager.load(tmp_path / "absent.txt") is False
    assert manager.sample_formats == list(DEFAULT_SAMPLE_FORMATS)
    assert manager.fragments == set()


def test_save_and_load_round_trip(tmp_path):
    manager = DictionaryManager()
    manager.set_params(4, 20, ["tga"])
    manager.add_path_fragments("maps/town/house.map")
    path = tmp_path / "dict.txt"
    manager.save(path)
    assert manager.sample_formats == list(DEFAULT_SAMPLE_FORMATS)

    loaded = DictionaryManager()
    assert loaded.load(path) is True
    assert (loaded.depth, loaded.tries, loaded.exts) == (4, 20, ["tga"])
    assert loaded.sample_formats == list(DEFAULT_SAMPLE_FORMATS)
    assert loaded.fragments == manager.fragments


def test_saved_fragments_are_sorted(tmp_path):
    manager = DictionaryManager()
    manager.merge_fragments({"zeta", "alpha", "mid"})
    path = tmp_path / "dict.txt"
    manager.save(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[1 + len(DEFAULT_SAMPLE_FORMATS):] == ["alpha", "mid", "zeta"]


def test_load_sample_section_and_comments(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("depth=2\nxxx/a\nfoo\nbar\n#maps\n\nbaz\n", encoding="utf-8")
    manager = DictionaryManager()
    assert manager.load(path) is True
    assert manager.depth == 2
    assert manager.exts == list(DEFAULT_EXTS)
    assert manager.sample_formats == ["xxx/a"]
    assert manager.fragments == {"bar", "baz"}


def test_load_without_samples_uses_defaults(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("depth=1;tries=2;exts=a\n", encoding="utf-8")
    manager = DictionaryManager()
    manager.load(path)
    assert manager.sample_formats == list(DEFAULT_SAMPLE_FORMATS)
    assert (manager.depth, manager.tries, manager.exts) == (1, 2, ["a"])