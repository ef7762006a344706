"""Radio button detection"""

from linkedin_auto_apply.config import SELECTORS

_READ_FIELDSET_JS = """fieldset => {
    const legend = fieldset.querySelector("legend");
    const visible = legend ? legend.querySelector('span[aria-hidden="true"]') : null;
    const question = (visible && visible.textContent.trim())
        || (legend ? legend.textContent.trim() : "");
    const options = Array.from(fieldset.querySelectorAll('input[type="radio"]')).map((radio) => {
        const label = radio.id ? fieldset.querySelector(`label[for="${radio.id}"]`) : null;
        let text = label ? label.textContent.trim() : "";
        if (!text) {
            const parent = radio.parentElement;
            const textElement = parent
                ? (parent.querySelector("span") || parent.querySelector("div"))
                : null;
            text = (textElement && textElement.textContent.trim()) || radio.value;
        }
        return { value: radio.value, text: text, selected: radio.checked };
    });
    return { question: question, options: options };
}"""


def detect_radio_groups(page):
    """
    Detect radio fieldsets of the current step.

    Returns list of dicts: label, options (value/text/selected/element).
    """
    try:
        radio_groups_data = []
        fieldsets = page.locator(f'{SELECTORS["modal"]} {SELECTORS["radio_fieldset"]}')

        for i in range(fieldsets.count()):
            fieldset = fieldsets.nth(i)
            info = fieldset.evaluate(_READ_FIELDSET_JS)
            radios = fieldset.locator('input[type="radio"]')

            options = []
            for j, option in enumerate(info["options"]):
                options.append(dict(option, element=radios.nth(j)))

            if not options:
                continue

            radio_groups_data.append(
                {
                    "label": info["question"],
                    "options": options,
                }
            )

        return radio_groups_data
    except Exception as e:
        print(f"  ⚠️ Error detecting radio groups: {e}")
        return []
