class GridButtonError(ValueError):
    pass


class InvalidButtonTarget(GridButtonError):
    def __init__(self, target, valid_targets):
        self.target = target
        self.valid_targets = list(valid_targets)
        super().__init__(
            "Invalid target supplied. Expects either of => [{}]".format(
                ", ".join(f'"{t}"' for t in self.valid_targets)
            )
        )


class InvalidButtonError(GridButtonError):
    def __init__(self, button):
        self.button = button
        super().__init__(f"The button {button} could not be found or is invalid.")
