def app_tile(app_name):
    name = str(app_name or "")
    return {
        "name": name,
        "label": name,
        "initial": name[:1].upper() or "?",
    }


def app_tiles(app_names):
    return [app_tile(name) for name in app_names or ()]
