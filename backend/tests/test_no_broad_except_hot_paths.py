from pathlib import Path
import re
import unittest


ROOT = Path(__file__).resolve().parents[2]
PACKAGE = ROOT / "backend" / "hotseat_chess"
HOT_PATHS = [
    ROOT / "frontend" / "server.py",
    PACKAGE / "api" / "serde.py",
    PACKAGE / "api" / "facade.py",
    PACKAGE / "core" / "game.py",
    PACKAGE / "core" / "rules.py",
]
# The HTTP boundary may catch everything, but only to log and answer 500/400.
ALLOWED_HANDLERS = {"api_unhandled", "json_read_unhandled"}
BROAD = re.compile(r"except Exception(?: as \w+)?:\n\s+(.*)")


class TestNoBroadExceptHotPaths(unittest.TestCase):
    def test_no_bare_excepts(self):
        for path in HOT_PATHS:
            with self.subTest(path=path.name):
                self.assertIsNone(re.search(r"except\s*:", path.read_text(encoding="utf-8")))

    def test_broad_catches_only_at_logged_http_boundary(self):
        violations = []
        for path in HOT_PATHS:
            content = path.read_text(encoding="utf-8")
            for m in BROAD.finditer(content):
                handled = re.match(r'LOGGER\.exception\("(\w+)"', m.group(1))
                if handled is None or handled.group(1) not in ALLOWED_HANDLERS:
                    line = content.count("\n", 0, m.start()) + 1
                    violations.append(f"{path.relative_to(ROOT)}:{line}")
        self.assertEqual(violations, [], msg="Broad except outside the HTTP boundary: " + ", ".join(violations))

    def test_boundary_catches_are_present(self):
        content = (ROOT / "frontend" / "server.py").read_text(encoding="utf-8")
        found = {m.group(1) for m in re.finditer(r'LOGGER\.exception\("(\w+)"', content)}
        self.assertEqual(found, ALLOWED_HANDLERS)


if __name__ == "__main__":
    unittest.main()
