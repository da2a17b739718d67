VERSION = "1.0.0"
PNGCHUNK = "pngchunk " + VERSION

if __name__ == "__main__":  # pragma: no cover
    print(VERSION)
