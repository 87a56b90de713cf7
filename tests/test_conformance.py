from polypath import PosixPath, UNCPath, WindowsPath
from polypath.testing import PathKindTests

from test_registry import SemicolonPath


class TestPosixPathKind(PathKindTests):
    kind = PosixPath
    samples = ("/", "/etc", "/etc/app/conf.yml", "/etc/../var/log/", "a/b", "../a", ".", "~/.config", "/Etc")


class TestWindowsPathKind(PathKindTests):
    kind = WindowsPath
    samples = ("C:\\", "C:\\Users\\me", "c:\\users\\ME\\x.txt", "D:\\data", "C:foo", "\\root", "a\\b", "..\\a", ".")


class TestUNCPathKind(PathKindTests):
    kind = UNCPath
    samples = ("\\\\srv\\share", "\\\\srv\\share\\a\\b", "\\\\SRV\\Share\\a\\c.txt", "\\\\other\\x\\y")


class TestSemicolonPathKind(PathKindTests):
    kind = SemicolonPath
    samples = ("test:;", "test:;a;b", "test:;a;..;c", "a;b", "..;a")
