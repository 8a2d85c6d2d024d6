from geometry_calculator.calculator_repl import main

if __name__ == "__main__":
    main()
