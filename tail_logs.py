
from cwtail.tail import main


if __name__ == "__main__":
    main()
