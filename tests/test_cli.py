import struct

from wdfunpack.cli import main
from wdfunpack.hashing import adjust_name, string_id


def build_wdf(path, files):
    body = bytearray()
    records = []
    for name, content in files.items():
        uid = string_id(adjust_name(name))
        records.append(struct.pack("<4I", uid, 12 + len(body), len(content), 0))
        body += content
    path.write_bytes(
        b"PFDW"
        + struct.pack("<iI", len(files), 12 + len(body))
        + bytes(body)
        + b"".join(records)
    )
    return path


def test_main_extracts_listed_files(tmp_path, capsys):
    wdf = build_wdf(tmp_path / "a.wdf", {"x/one.txt": b"one", "two.txt": b"two"})
    lst = tmp_path / "a.lst"
    lst.write_bytes(b"x/one.txt\ntwo.txt\nthree.txt\n")
    out = tmp_path / "out"
    assert main([str(wdf), str(lst), str(out)]) == 0
    assert (out / "x" / "one.txt").read_bytes() == b"one"
    assert (out / "two.txt").read_bytes() == b"two"
    printed = capsys.readouterr().out.splitlines()
    assert printed[0].startswith("[Extracted] x/one.txt")
    assert printed[2].startswith("[Not found] three.txt")
    assert printed[-1] == "Done: 2 extracted, 1 failed"


def test_main_reports_bad_archive(tmp_path, capsys):
    wdf = tmp_path / "bad.wdf"
    wdf.write_bytes(b"nothing here")
    lst = tmp_path / "a.lst"
    lst.write_bytes(b"a\n")
    assert main([str(wdf), str(lst), str(tmp_path / "out")]) == 1
    assert capsys.readouterr().err.startswith("error:")


def test_main_reports_missing_list(tmp_path, capsys):
    wdf = build_wdf(tmp_path / "a.wdf", {"a": b"a"})
    assert main([str(wdf), str(tmp_path / "absent.lst"), str(tmp_path / "out")]) == 1
    assert "error:" in capsys.readouterr().err