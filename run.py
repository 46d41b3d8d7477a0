from rentalpay import create_app


def main():
    app = create_app()
    app.run(debug=True, port=5004, use_reloader=False)


if __name__ == '__main__':
    main()
