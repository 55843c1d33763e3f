import argparse
from itunes_service import configure_logging, get_bundle_id


def main(argv=None):
    parser = argparse.ArgumentParser(description="Resolve an App Store id or bundle id to its bundle id")
    parser.add_argument("app_id", help="Numeric App Store id or bundle id")
    args = parser.parse_args(argv)

    configure_logging()
    print(get_bundle_id(args.app_id))


if __name__ == "__main__":
    main()
