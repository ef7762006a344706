"""Checkbox group detection"""

from linkedin_auto_apply.config import SELECTORS


def detect_checkbox_groups(page):
    """
    Detect checkbox fieldsets of the current step (boolean/yes-no style groups).

    Returns list of dicts: label, checkboxes (locators in document order).
    """
    try:
        groups = []
        fieldsets = page.locator(f'{SELECTORS["modal"]} {SELECTORS["checkbox_fieldset"]}')

        for i in range(fieldsets.count()):
            fieldset = fieldsets.nth(i)
            boxes = fieldset.locator('input[type="checkbox"]')
            count = boxes.count()
            if count == 0:
                continue

            legend = fieldset.locator("legend")
            label = legend.first.inner_text().strip() if legend.count() > 0 else ""

            groups.append(
                {
                    "label": label,
                    "checkboxes": [boxes.nth(j) for j in range(count)],
                }
            )

        return groups
    except Exception as e:
        print(f"  ⚠️ Error detecting checkbox groups: {e}")
        return []
