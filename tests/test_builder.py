import unittest
from pathlib import Path

from daylog import Builder, Logger, get_logger
from daylog.time_format import DEFAULT_TIME_FORMAT


class Service:
    pass


class TestBuilder(unittest.TestCase):
    def test_defaults(self):
        b = Builder()
        self.assertIsNone(b.label)
        self.assertEqual(b.time_format, DEFAULT_TIME_FORMAT)
        self.assertIsNone(b.file_path)
        self.assertIsNone(b.directory_name)

    def test_setters_return_same_instance(self):
        b = Builder()
        self.assertIs(b.set_time_format("HH"), b)
        self.assertIs(b.set_type(Service), b)
        self.assertIs(b.set_file_path("/tmp/a.log"), b)
        self.assertIs(b.set_directory_name("App"), b)

    def test_type_descriptor_forms(self):
        # Classes contribute their name; strings are used as-is; instances
        # contribute their class name
        self.assertEqual(Builder(Service).label, "Service")
        self.assertEqual(Builder("custom").label, "custom")
        self.assertEqual(Builder().set_type(Service()).label, "Service")
        self.assertIsNone(Builder(Service).set_type(None).label)

    def test_empty_time_format_keeps_previous(self):
        b = Builder().set_time_format("YYYY").set_time_format("").set_time_format(None)
        self.assertEqual(b.time_format, "YYYY")
        self.assertEqual(Builder(time_format="").time_format, DEFAULT_TIME_FORMAT)

    def test_file_path_can_be_cleared(self):
        b = Builder().set_file_path("/tmp/x.log").set_file_path(None)
        self.assertIsNone(b.build().file_path)
        b = Builder().set_file_path("/tmp/x.log").set_file_path("")
        self.assertIsNone(b.build().file_path)

    def test_build_copies_values(self):
        b = (
            Builder(Service)
            .set_time_format("HH:mm")
            .set_file_path("/tmp/service.log")
            .set_directory_name("Svc")
        )
        log = b.build()
        self.assertIsInstance(log, Logger)
        self.assertEqual(log.label, "Service")
        self.assertEqual(log.time_format, "HH:mm")
        self.assertEqual(log.file_path, Path("/tmp/service.log"))
        self.assertEqual(log.directory_name, "Svc")

        # Later builder changes do not leak into an already built logger
        b.set_type("Other").set_directory_name("Elsewhere")
        self.assertEqual(log.label, "Service")
        self.assertEqual(log.directory_name, "Svc")

    def test_get_logger_quick_form(self):
        log = get_logger(Service)
        self.assertEqual(log.label, "Service")
        self.assertEqual(log.time_format, DEFAULT_TIME_FORMAT)
        self.assertIsNone(log.file_path)
        self.assertIsNone(log.directory_name)
        self.assertIsNone(get_logger().label)

    def test_empty_label_is_omitted(self):
        self.assertIsNone(Builder("").build().label)


if __name__ == "__main__":
    unittest.main()
