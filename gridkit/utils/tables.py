DEFAULT_PAGE_SIZE = 20
PAGE_SIZE_OPTIONS = [20, 30, 50, 100]


def merge_attrs(*dicts):
    """Merge HTML attribute dicts, joining ``class`` values instead of replacing them."""
    merged = {}
    for d in dicts:
        for key, val in d.items():
            if key == "class" and merged.get(key):
                merged[key] = " ".join(dict.fromkeys(f"{merged[key]} {val}".split()))
            else:
                merged[key] = val
    return merged


def get_validated_page_size(request):
    try:
        page_size = int(request.GET.get("page_size", DEFAULT_PAGE_SIZE))
        return page_size if page_size in PAGE_SIZE_OPTIONS else DEFAULT_PAGE_SIZE
    except (ValueError, TypeError):
        return DEFAULT_PAGE_SIZE
