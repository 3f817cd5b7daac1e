import io
import os
import json
import shutil
import logging
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from rich.console import Console

from ..main import configure_file_logging, main, read_items
from ..errors import InvalidArgumentError


class TestMain(unittest.TestCase):
    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.log_file = self.temp_dir / "logs" / "paginator.log"
        self.config_file = self.temp_dir / "config.json"
        self.config_file.write_text(json.dumps({"pagination": {"page_size": 2}}), encoding="utf-8")
        self.items_file = self.temp_dir / "items.json"
        self.items_file.write_text(json.dumps([1, 2, 3, 4, 5]), encoding="utf-8")

        self.env_patch = patch.dict(os.environ, {}, clear=False)
        self.env_patch.start()
        os.environ.pop("PAGINATOR_PAGE_SIZE", None)
        os.environ.pop("PAGINATOR_LOG_LEVEL", None)
        self.dotenv_patch = patch("paginator.config.dotenv.load_dotenv")
        self.dotenv_patch.start()

        self.output = io.StringIO()
        self.console = Console(file=self.output, width=120, color_system=None)

    def tearDown(self):
        for handler in logging.root.handlers[:]:
            if isinstance(handler, logging.FileHandler):
                logging.root.removeHandler(handler)
                handler.close()
        self.dotenv_patch.stop()
        self.env_patch.stop()
        shutil.rmtree(self.temp_dir)

    def run_main(self, *args):
        argv = [*args, "--config", str(self.config_file), "--log-file", str(self.log_file)]
        return main(argv, console=self.console)

    def test_renders_page_table(self):
        exit_code = self.run_main(str(self.items_file), "--page", "2")
        self.assertEqual(exit_code, 0)
        output = self.output.getvalue()
        self.assertIn("Page 2 of 3 (5 items)", output)
        self.assertTrue(self.log_file.exists())

    def test_json_output(self):
        exit_code = self.run_main(str(self.items_file), "--page", "3", "--json")
        self.assertEqual(exit_code, 0)
        self.assertEqual(json.loads(self.output.getvalue()), [5])

    def test_page_size_argument_overrides_config(self):
        exit_code = self.run_main(str(self.items_file), "--page-size", "4", "--page", "1", "--json")
        self.assertEqual(exit_code, 0)
        self.assertEqual(json.loads(self.output.getvalue()), [1, 2, 3, 4])

    def test_total_only(self):
        exit_code = self.run_main(str(self.items_file), "--total-only")
        self.assertEqual(exit_code, 0)
        self.assertEqual(self.output.getvalue().strip(), "3")

    def test_reads_stdin(self):
        with patch("sys.stdin", io.StringIO(json.dumps(["a", "b", "c"]))):
            exit_code = self.run_main("--page", "2", "--json")
        self.assertEqual(exit_code, 0)
        self.assertEqual(json.loads(self.output.getvalue()), ["c"])

    def test_invalid_page_number_fails(self):
        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            exit_code = self.run_main(str(self.items_file), "--page", "0")
        self.assertEqual(exit_code, 1)
        self.assertIn("must be greater than zero", stderr.getvalue())

    def test_invalid_page_size_for_total_fails(self):
        with patch("sys.stderr", new_callable=io.StringIO):
            exit_code = self.run_main(str(self.items_file), "--total-only", "--page-size", "-1")
        self.assertEqual(exit_code, 1)

    def test_invalid_utf8_input_fails(self):
        self.items_file.write_bytes(b'["\xff"]')
        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            exit_code = self.run_main(str(self.items_file))
        self.assertEqual(exit_code, 1)
        self.assertIn("Could not read JSON input", stderr.getvalue())

    def test_non_object_config_section_fails(self):
        self.config_file.write_text(json.dumps({"logging": "x"}), encoding="utf-8")
        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            exit_code = self.run_main(str(self.items_file))
        self.assertEqual(exit_code, 1)
        self.assertIn("Configuration problem", stderr.getvalue())

    def test_bad_config_fails(self):
        self.config_file.write_text("{broken", encoding="utf-8")
        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            exit_code = self.run_main(str(self.items_file))
        self.assertEqual(exit_code, 1)
        self.assertIn("Configuration problem", stderr.getvalue())


class TestConfigureFileLogging(unittest.TestCase):
    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.root = logging.getLogger()
        self.saved_handlers = self.root.handlers[:]
        self.saved_level = self.root.level

    def tearDown(self):
        for handler in self.root.handlers[:]:
            self.root.removeHandler(handler)
            if isinstance(handler, logging.FileHandler):
                handler.close()
        for handler in self.saved_handlers:
            self.root.addHandler(handler)
        self.root.setLevel(self.saved_level)
        shutil.rmtree(self.temp_dir)

    def test_replaces_root_handlers_with_file(self):
        log_file = self.temp_dir / "nested" / "run.log"
        handler = configure_file_logging("debug", log_file)
        self.assertEqual(self.root.handlers, [handler])
        self.assertEqual(self.root.level, logging.DEBUG)
        logging.getLogger("paginator.test").debug("hello from the test")
        handler.flush()
        self.assertIn("paginator.test - DEBUG - hello from the test", log_file.read_text(encoding="utf-8"))

    def test_unknown_level_falls_back_to_info(self):
        configure_file_logging("chatty", self.temp_dir / "run.log")
        self.assertEqual(self.root.level, logging.INFO)


class TestReadItems(unittest.TestCase):
    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_rejects_non_array(self):
        path = self.temp_dir / "object.json"
        path.write_text(json.dumps({"items": [1]}), encoding="utf-8")
        with self.assertRaises(InvalidArgumentError):
            read_items(str(path))

    def test_invalid_utf8_input(self):
        path = self.temp_dir / "latin.json"
        path.write_bytes(b'["\xff\xfe"]')
        with self.assertRaises(InvalidArgumentError) as ctx:
            read_items(str(path))
        self.assertIsInstance(ctx.exception.__cause__, UnicodeDecodeError)

    def test_missing_file(self):
        with self.assertRaises(InvalidArgumentError):
            read_items(str(self.temp_dir / "nope.json"))


if __name__ == "__main__":
    unittest.main()
