"""Text question detection inside the application modal"""

from linkedin_auto_apply.config import SELECTORS

# Reads the label and the control kind of one .fb-dash-form-element
_READ_CONTAINER_JS = """(container, selectors) => {
    const label = container.querySelector(selectors.textLabel)
        || container.querySelector("label");
    const control = container.querySelector(selectors.control);
    if (!label || !control) return null;
    const tag = control.tagName.toLowerCase();
    return {
        label: label.textContent.trim(),
        tag: tag,
        inputType: tag === "textarea" ? "textarea" : (control.type || "text"),
        value: control.type === "checkbox" ? "" : (control.value || ""),
        checked: Boolean(control.checked),
        role: control.getAttribute("role") || "",
    };
}"""


def detect_text_questions(page):
    """
    Detect label + control pairs of the current wizard step, in document order.

    Returns a list of dicts: element, label, tag, input_type, value, checked,
    is_checkbox, is_combobox.
    """
    try:
        questions = []
        containers = page.locator(f'{SELECTORS["modal"]} {SELECTORS["form_element"]}')
        selectors = {
            "textLabel": SELECTORS["text_label"],
            "control": SELECTORS["form_control"],
        }

        for i in range(containers.count()):
            container = containers.nth(i)
            info = container.evaluate(_READ_CONTAINER_JS, selectors)
            if not info:
                continue

            element = container.locator(SELECTORS["form_control"]).first
            questions.append(
                {
                    "element": element,
                    "label": info["label"],
                    "tag": info["tag"],
                    "input_type": info["inputType"],
                    "value": info["value"],
                    "checked": info["checked"],
                    "is_checkbox": info["inputType"] == "checkbox",
                    "is_combobox": info["role"] == "combobox",
                }
            )

        return questions

    except Exception as e:
        print(f"  ⚠️ Error detecting text fields: {e}")
        return []
