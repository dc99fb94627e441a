from robot.api import logger
from selenium.common.exceptions import JavascriptException

SET_SELECTED_SCRIPT = """
var option = arguments[0], selected = arguments[1];
option.selected = selected;
if (selected) {
    option.setAttribute("selected", "selected");
} else {
    option.removeAttribute("selected");
}
"""

NOTIFY_CHANGE_SCRIPT = """
var select = arguments[0].closest("select");
if (select) {
    var evt = document.createEvent("HTMLEvents");
    evt.initEvent("change", true, true);
    select.dispatchEvent(evt);
}
"""


class ScriptApplier:
    """Changes the selected state of options by injected JavaScript.

    Used with drivers that can not select options of a multi-selection list
    natively. The browser does not fire change events for scripted changes,
    so ``notify_change`` does it after every mutation.
    """

    def __init__(self, driver):
        self.driver = driver

    def apply(self, option, selected: bool):
        self.driver.execute_script(SET_SELECTED_SCRIPT, option, selected)
        self.notify_change(option)

    def notify_change(self, option):
        """Best effort: errors thrown by the page's change handlers are always ignored.

        A list without any handler is a no-op.
        """
        try:
            self.driver.execute_script(NOTIFY_CHANGE_SCRIPT, option)
        except JavascriptException as error:
            logger.debug(f"Change handler of the select list failed: {error}")
