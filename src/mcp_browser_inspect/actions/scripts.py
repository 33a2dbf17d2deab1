"""Run caller-supplied JavaScript in the page."""

import logging
logger = logging.getLogger(__name__)


# The script text is evaluated as an expression. A function expression such as
# "() => document.title" is called. Promises are awaited by the WebDriver.
_EVALUATE_WRAPPER = """
const __mbiResult = (0, eval)(arguments[0]);
return typeof __mbiResult === 'function' ? __mbiResult() : __mbiResult;
"""


def run_script(driver, script: str):
    """
    Evaluate ``script`` in the page context and return its value.

    Errors thrown by the script (selenium JavascriptException and friends)
    are not caught.
    """
    logger.info("Executing JavaScript...")
    return driver.execute_script(_EVALUATE_WRAPPER, script)


__all__ = ["run_script"]
