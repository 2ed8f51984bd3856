# engine/exceptions.py

class ForecastError(Exception):
    pass


class SeriesFormatError(ForecastError):
    pass


class HorizonError(ForecastError):
    pass
