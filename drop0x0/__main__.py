from drop0x0.cli import run

if __name__ == "__main__":
    run()
