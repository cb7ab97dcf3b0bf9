"""Tests for input file discovery."""

from cpfcheck.discovery import list_txt_files


class TestListTxtFiles:
    """Test listing .txt files in the input directory."""

    def test_lists_only_txt_files_sorted(self, input_dir):
        for name in ['b.txt', 'a.txt', 'c.csv', 'notes.TXT', 'd.txt.bak']:
            (input_dir / name).write_text('52998224725\n')
        assert [p.name for p in list_txt_files(input_dir)] == ['a.txt', 'b.txt']

    def test_not_recursive(self, input_dir):
        nested = input_dir / 'sub'
        nested.mkdir()
        (nested / 'inner.txt').write_text('')
        (input_dir / 'top.txt').write_text('')
        assert [p.name for p in list_txt_files(input_dir)] == ['top.txt']

    def test_skips_directories_named_txt(self, input_dir):
        (input_dir / 'folder.txt').mkdir()
        assert list_txt_files(input_dir) == []

    def test_accepts_string_path(self, input_dir):
        (input_dir / 'x.txt').write_text('')
        assert len(list_txt_files(str(input_dir))) == 1

    def test_missing_directory(self, tmp_path):
        assert list_txt_files(tmp_path / 'does_not_exist') == []

    def test_empty_directory(self, input_dir):
        assert list_txt_files(input_dir) == []
