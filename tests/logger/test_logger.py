import re
import sys

from s3url.logger import Level, Logger


def strip_ansi(text):
    ansi_escape = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
    return ansi_escape.sub("", text)


class MockPrint:
    def __init__(self):
        self.called_with = None

    def __call__(self, called_with):
        self.called_with = strip_ansi(called_with)

    @property
    def called(self):
        return self.called_with


def create_logger(*args, **kwargs):
    print_fn = MockPrint()
    return print_fn, Logger(*args, **kwargs, print_fn=print_fn)


class TestLogger:
    def test_init(self):
        log = Logger(namespace="test", min_level=Level.DEBUG, print_fn=sys.stderr.write, context={"bucket": "b"})
        assert log.namespace == "test"
        assert log.min_level == Level.DEBUG
        assert log.print_fn == sys.stderr.write
        assert log.context == {"bucket": "b"}
        assert not log.silent

    def test_log_without_level_does_nothing(self):
        print_fn, log = create_logger(min_level=Level.DEBUG)
        log.log()
        assert not print_fn.called

    def test_log_below_min_level_does_nothing(self):
        print_fn, log = create_logger(min_level=Level.INFO)
        log.debug("hidden")
        assert not print_fn.called

    def test_log_with_level(self):
        print_fn, log = create_logger()
        log.log(level=Level.INFO)
        assert print_fn.called_with == "[info]"

    def test_log_with_name_message_and_context(self):
        print_fn, log = create_logger(namespace="s3url")
        log.info("parsed url", bucket="mybucket", key="a/b")
        assert print_fn.called_with == "[info] s3url: parsed url bucket=mybucket key=a/b"

    def test_namespace_argument_overrides(self):
        print_fn, log = create_logger(namespace="s3url")
        log.log(level=Level.WARN, namespace="other", message="m")
        assert print_fn.called_with == "[warn] other: m"

    def test_each_level_method(self):
        print_fn, log = create_logger(min_level=Level.VERBOSE)
        for level, method in [
            (Level.VERBOSE, log.verbose),
            (Level.DEBUG, log.debug),
            (Level.INFO, log.info),
            (Level.WARN, log.warn),
            (Level.ERROR, log.error),
            (Level.CRITICAL, log.critical),
        ]:
            method("")
            assert print_fn.called_with == "[{}]".format(str(level))

    def test_with_namespace(self):
        print_fn, log = create_logger(namespace="s3url", context={"a": 1})
        child = log.with_namespace("bucket_url")
        child.info("m")
        assert log.namespace == "s3url"
        assert print_fn.called_with == "[info] bucket_url: m a=1"

    def test_with_context_merges(self):
        print_fn, log = create_logger(context={"a": 1})
        child = log.with_context(a=2, b=3)
        child.info("m", c=4)
        assert log.context == {"a": 1}
        assert print_fn.called_with == "[info] m a=2 b=3 c=4"

    def test_silence(self):
        print_fn, log = create_logger()
        log.set_silence(True)
        log.critical("hidden")
        log.with_namespace("child").critical("hidden")
        assert not print_fn.called
        log.set_silence(False)
        log.critical("shown")
        assert print_fn.called_with == "[crit] shown"
