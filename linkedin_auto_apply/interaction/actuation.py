"""Low-level DOM actuation through Playwright locators"""

# Sets value through the prototype's native setter so framework-shadowed
# setters on the instance do not swallow the write, then fires "input".
NATIVE_SET_VALUE_JS = """(el, value) => {
    const ownSetter = Object.getOwnPropertyDescriptor(el, "value")?.set;
    const prototype = Object.getPrototypeOf(el);
    const prototypeSetter = Object.getOwnPropertyDescriptor(prototype, "value")?.set;
    if (prototypeSetter && ownSetter !== prototypeSetter) {
        prototypeSetter.call(el, value);
    } else if (ownSetter) {
        ownSetter.call(el, value);
    } else {
        throw new Error("Unable to set value");
    }
    el.dispatchEvent(new Event("input", { bubbles: true }));
}"""

SET_CHECKED_JS = """(el, checked) => { el.checked = checked; }"""

SELECT_INDEX_JS = """(el, index) => {
    Array.from(el.options).forEach((option, i) => { option.selected = i === index; });
}"""

SELECT_VALUE_JS = """(el, value) => {
    Array.from(el.options).forEach((option) => { option.selected = option.value === value; });
}"""

SCROLL_INTO_VIEW_JS = """el => el.scrollIntoView({ block: "center" })"""

BLUR_JS = """el => el.blur()"""

SCROLL_TO_BOTTOM_JS = """el => el.scrollTo({ top: el.scrollHeight })"""

HIGHLIGHT_JS = """el => {
    let count = 0;
    const intervalId = setInterval(() => {
        el.style.border = count % 2 === 0 ? "2px solid red" : "none";
        count++;
        if (count === 10) {
            clearInterval(intervalId);
            el.style.border = "none";
        }
    }, 500);
}"""

# Synthetic key sequence the page's reactive layer listens for
KEY_EVENT_SEQUENCE = ("keydown", "keypress", "input", "keyup")


def set_native_value(element, value):
    element.evaluate(NATIVE_SET_VALUE_JS, value)


def dispatch(element, event_type):
    element.dispatch_event(event_type, {"bubbles": True, "cancelable": True})


def set_checked(element, checked=True):
    element.evaluate(SET_CHECKED_JS, bool(checked))


def select_index(element, index):
    element.evaluate(SELECT_INDEX_JS, index)


def select_value(element, value):
    element.evaluate(SELECT_VALUE_JS, value)


def scroll_into_view(element):
    element.evaluate(SCROLL_INTO_VIEW_JS)


def blur(element):
    element.evaluate(BLUR_JS)
