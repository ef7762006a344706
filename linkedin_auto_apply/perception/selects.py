"""Select dropdown detection"""

from linkedin_auto_apply.config import SELECTORS

_READ_SELECT_JS = """select => {
    const parent = select.closest(".fb-dash-form-element");
    let label = "";
    if (parent) {
        const labelElement = parent.querySelector("label");
        if (labelElement) {
            const visible = labelElement.querySelector('span[aria-hidden="true"]');
            label = (visible && visible.textContent.trim()) || labelElement.innerText.trim();
        }
    }
    return {
        label: label,
        hasParent: Boolean(parent),
        selectedIndex: select.selectedIndex,
        options: Array.from(select.options).map((option) => ({
            value: option.value,
            text: option.textContent.trim(),
            selected: option.selected,
        })),
    };
}"""


def detect_select_fields(page):
    """
    Detect <select> dropdowns of the current step.

    Returns list of dicts: element, label, options, selected_index.
    """
    try:
        select_fields = []
        selects = page.locator(f'{SELECTORS["modal"]} {SELECTORS["dropdown"]}')

        for i in range(selects.count()):
            select = selects.nth(i)
            info = select.evaluate(_READ_SELECT_JS)
            if not info["hasParent"]:
                continue

            select_fields.append(
                {
                    "element": select,
                    "label": info["label"] or f"Dropdown {i}",
                    "options": info["options"],
                    "selected_index": info["selectedIndex"],
                }
            )

        return select_fields
    except Exception as e:
        print(f"  ⚠️ Error detecting select fields: {e}")
        return []
