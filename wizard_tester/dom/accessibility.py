def accessible_name(el) -> str:
    """Best-effort accessible name: aria-label -> title -> aria-labelledby -> inner_text."""
    for attr in ("aria-label", "title"):
        val = el.get_attribute(attr)
        if val:
            return val.strip()

    labelled_by = el.get_attribute("aria-labelledby")
    if labelled_by:
        for id_ in labelled_by.split():
            labelled_el = el.page.locator(f"[id='{id_}']")
            if labelled_el.count() > 0:
                txt = labelled_el.first.inner_text().strip()
                if txt:
                    return txt

    return el.inner_text().strip()
