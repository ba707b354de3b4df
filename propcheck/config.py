import attr

@attr.s
class Config:
    '''Configuration object contains process-wide defaults

    Settings:
    - Config.trials: int
        Number of trials a property is run for when the caller does not say.

    - Config.seed: int or None
        Seed for the initial random state; None means seed from the wall clock
        on every run, an integer makes every run reproducible.

    - Config.colour: bool
        When True falsification reports are wrapped in ANSI red.
    '''
    trials = attr.ib(default=100)
    seed = attr.ib(default=None)
    colour = attr.ib(default=False)

CONFIG = Config()
