def auto_getters(cls):
    """
    Automatically generates getter methods for all locators declared in the
    page definition after initialization.
    Example: elements["search_field"] -> get_search_field()
    """
    original_init = cls.__init__

    def new_init(self, *args, **kwargs):
        # Run the original __init__ first
        original_init(self, *args, **kwargs)

        names = list(self.definition.elements) + list(self.definition.sections)
        for name in names:
            if name.startswith("_"):  # skip private
                continue

            getter_name = f"get_{name}"
            if not hasattr(self, getter_name):
                # Bind name properly in lambda default arg
                setattr(self, getter_name, lambda n=name: self.get_locator(n))

    cls.__init__ = new_init
    return cls
